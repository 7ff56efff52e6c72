"""OpenAI-compatible chat backend (OpenRouter by default)."""

import time
import logging
from typing import Optional, Dict

from openai import AsyncOpenAI

from vtranslate.core.exceptions import ConfigurationError
from ..base import ChatBackend, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class OpenAIChatBackend(ChatBackend):
    """Chat backend for any OpenAI-compatible endpoint."""

    DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
    DEFAULT_MODEL = "openai/gpt-4o-mini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        referer: str = "https://vtranslate.com",
        app_title: str = "VTranslate",
        timeout: float = 30.0,
        client: Optional[AsyncOpenAI] = None
    ):
        if not api_key and client is None:
            raise ConfigurationError(
                "Translation API key not found",
                config_key="translation.api_key",
                env_var="OPENROUTER_API_KEY"
            )

        super().__init__(api_key, model)
        self.base_url = base_url

        # OpenRouter uses these headers for attribution
        headers: Dict[str, str] = {"X-Title": app_title}
        if referer:
            headers["HTTP-Referer"] = referer

        self.client = client or AsyncOpenAI(
            api_key=self.api_key,
            base_url=base_url,
            default_headers=headers,
            timeout=timeout,
            max_retries=0
        )

    async def complete(self, request: ChatRequest) -> ChatResponse:
        """Run one chat completion."""
        start_time = time.time()
        model = request.model or self.model

        response = await self.client.chat.completions.create(
            model=model,
            messages=[m.to_dict() for m in request.messages],
            temperature=request.temperature
        )

        choices = []
        for choice in response.choices or []:
            message = getattr(choice, "message", None)
            # Positional, so an empty first choice is not replaced by the second
            choices.append(getattr(message, "content", None))

        usage = getattr(response, "usage", None)
        tokens_used = usage.total_tokens if usage else 0
        latency = time.time() - start_time
        logger.debug(f"{model} answered in {latency:.2f}s ({tokens_used} tokens)")

        return ChatResponse(
            choices=choices,
            backend="openai",
            model=model,
            tokens_used=tokens_used,
            latency=latency
        )

    async def aclose(self) -> None:
        await self.client.close()

    def get_info(self) -> Dict:
        info = super().get_info()
        info["base_url"] = self.base_url
        return info
