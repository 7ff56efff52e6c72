"""
Translation session: loading/error state and debouncing around a client.

A session is what a UI view holds on to. It exposes the same three
operations the view needs (translate, debounced_translate, detect_language),
tracks whether anything is in flight, and keeps the most recent failure in
a single error slot for display. `translate_all` returns one outcome per
language so callers that fan out do not depend on that slot.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Dict, Iterable, List, Optional

from vtranslate.core.exceptions import TranslationFailure, DetectionFailure
from vtranslate.core.models import ErrorCode, TranslationError, TranslationOutcome
from vtranslate.translation.client import TranslationClient, DEFAULT_DETECTED_LANGUAGE
from vtranslate.translation.languages import FALLBACK_LANGUAGES

logger = logging.getLogger(__name__)

DEBOUNCE_DELAY = 0.5


class TranslationSession:
    """Stateful wrapper around a TranslationClient for one UI view."""

    def __init__(self, client: TranslationClient, debounce_delay: float = DEBOUNCE_DELAY):
        self.client = client
        self.debounce_delay = debounce_delay
        self.error: Optional[TranslationError] = None
        self._in_flight = 0
        self._pending: Optional[asyncio.Task] = None
        self.supported_languages: List[str] = self._load_supported_languages()

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    def _load_supported_languages(self) -> List[str]:
        try:
            return list(self.client.get_supported_languages())
        except Exception as e:
            logger.warning(f"Failed to fetch supported languages: {e}")
            return list(FALLBACK_LANGUAGES)

    def _begin(self) -> None:
        self._in_flight += 1

    def _end(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)

    async def translate(self, text: str, target_language: str) -> str:
        """
        Translate text, recording any failure in the error slot.

        Raises:
            TranslationFailure: Re-raised after being recorded
        """
        self.error = None

        if not text or not text.strip():
            return ""

        self._begin()
        try:
            return await self.client.translate(text, target_language)
        except TranslationFailure as e:
            self.error = TranslationError(
                message=e.message or "Translation failed. Please try again.",
                code=ErrorCode.TRANSLATION_ERROR
            )
            raise
        finally:
            self._end()

    def debounced_translate(
        self,
        text: str,
        target_language: str,
        callback: Callable[[str], None]
    ) -> Optional[asyncio.Task]:
        """
        Translate after a quiet period, replacing any call still pending.

        The superseded call is cancelled even if its request has already
        been sent, so its callback never runs. Blank text cancels the
        pending call and invokes `callback("")` immediately.

        Must be called from a running event loop.

        Returns:
            The scheduled task, or None for blank text
        """
        self.cancel_pending()
        self.error = None

        if not text or not text.strip():
            callback("")
            return None

        task = asyncio.get_running_loop().create_task(
            self._run_debounced(text, target_language, callback)
        )
        # Counted from scheduling; the done callback also fires for tasks
        # cancelled before they ever started.
        self._begin()
        task.add_done_callback(self._on_debounced_done)
        self._pending = task
        return task

    async def _run_debounced(
        self,
        text: str,
        target_language: str,
        callback: Callable[[str], None]
    ) -> None:
        await asyncio.sleep(self.debounce_delay)
        try:
            translation = await self.translate(text, target_language)
        except TranslationFailure:
            # Already recorded in self.error by translate()
            callback("")
            return
        callback(translation)

    def _on_debounced_done(self, task: asyncio.Task) -> None:
        self._end()
        if self._pending is task:
            self._pending = None
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Debounced translation callback failed: {task.exception()}")

    def cancel_pending(self) -> None:
        """Cancel the scheduled (or in-flight) debounced call, if any."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def detect_language(self, text: str) -> str:
        """
        Detect the language of text, recording any failure in the error slot.

        Raises:
            DetectionFailure: Re-raised after being recorded
        """
        if not text or not text.strip():
            return DEFAULT_DETECTED_LANGUAGE

        self._begin()
        try:
            return await self.client.detect_language(text)
        except DetectionFailure as e:
            self.error = TranslationError(
                message=e.message or "Language detection failed",
                code=ErrorCode.DETECTION_ERROR
            )
            raise
        finally:
            self._end()

    async def translate_all(
        self,
        text: str,
        languages: Iterable[str]
    ) -> Dict[str, TranslationOutcome]:
        """
        Translate text into every language concurrently.

        Returns:
            One outcome per language, keyed by language, in request order
        """
        languages = list(dict.fromkeys(languages))

        async def run(language: str) -> TranslationOutcome:
            try:
                translation = await self.translate(text, language)
            except TranslationFailure as e:
                return TranslationOutcome(
                    language=language,
                    error=TranslationError(e.message, ErrorCode.TRANSLATION_ERROR)
                )
            return TranslationOutcome(language=language, text=translation)

        outcomes = await asyncio.gather(*(run(lang) for lang in languages))
        return {outcome.language: outcome for outcome in outcomes}

    async def aclose(self) -> None:
        """Cancel pending work and wait for it to unwind."""
        task = self._pending
        self.cancel_pending()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
