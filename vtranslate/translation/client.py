"""
Remote translation client.

Builds prompts per target language, sends them through a ChatBackend and
turns every failure into TranslationFailure / DetectionFailure.
"""

import logging
from typing import List, Optional

from vtranslate.core.exceptions import TranslationFailure, DetectionFailure
from .base import ChatBackend, ChatRequest, ChatResponse
from .languages import SUPPORTED_LANGUAGES
from .prompts import build_translation_messages, build_detection_messages

logger = logging.getLogger(__name__)

DEFAULT_DETECTED_LANGUAGE = "English"


class TranslationClient:
    """Translate and detect languages through a chat-completion backend."""

    def __init__(self, backend: ChatBackend, temperature: float = 0.3):
        self.backend = backend
        self.temperature = temperature

    async def translate(self, text: str, target_language: str) -> str:
        """
        Translate text into the target language.

        Args:
            text: Source text
            target_language: Target language name (e.g. "Spanish")

        Returns:
            Translated text, or "" for blank input (no remote call)

        Raises:
            TranslationFailure: Remote call failed or returned no completion
        """
        if not text or not text.strip():
            return ""

        request = ChatRequest(
            messages=build_translation_messages(text, target_language),
            temperature=self.temperature
        )

        try:
            response = await self.backend.complete(request)
        except Exception as e:
            logger.error(f"Translation to {target_language} failed: {e}")
            raise TranslationFailure(
                _describe(e) or "Translation failed",
                target_language=target_language,
                backend=self.backend.name,
                original_error=e
            ) from e

        content = _first_content(response)
        if content is None:
            raise TranslationFailure(
                "Translation failed",
                target_language=target_language,
                backend=self.backend.name
            )
        return content

    async def detect_language(self, text: str) -> str:
        """
        Detect the language of text.

        Returns:
            Language name in English; "English" for blank input (no remote call)

        Raises:
            DetectionFailure: Remote call failed or returned no completion
        """
        if not text or not text.strip():
            return DEFAULT_DETECTED_LANGUAGE

        request = ChatRequest(
            messages=build_detection_messages(text),
            temperature=self.temperature
        )

        try:
            response = await self.backend.complete(request)
        except Exception as e:
            logger.error(f"Language detection failed: {e}")
            raise DetectionFailure(
                _describe(e) or "Language detection failed",
                backend=self.backend.name,
                original_error=e
            ) from e

        content = _first_content(response)
        if content is None:
            raise DetectionFailure("Language detection failed", backend=self.backend.name)
        return content

    def get_supported_languages(self) -> List[str]:
        """Languages with a dedicated translation profile."""
        return list(SUPPORTED_LANGUAGES)

    async def aclose(self) -> None:
        await self.backend.aclose()


def _first_content(response: Optional[ChatResponse]) -> Optional[str]:
    if response is None or response.content is None:
        return None
    return response.content.strip()


def _describe(error: Exception) -> str:
    # openai.APIStatusError carries the provider message in `message`
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error)
