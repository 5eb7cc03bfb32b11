"""Clients for the external text-generation API.

Both providers expose the same ``generate(prompt) -> str`` coroutine so the
advisor can be handed either one, or a stub in tests.
"""

from __future__ import annotations

import logging
from typing import Protocol

import anthropic
from google import genai

from villageinfo.config import Settings

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class GeminiGenerator:
    """Google Gemini via the ``google-genai`` SDK.

    Each instance owns its own ``genai.Client``; no SDK-global key is set.
    """

    provider = "gemini"

    def __init__(self, api_key: str, model_name: str = "gemini-2.0-flash"):
        self.model_name = model_name
        self._client = genai.Client(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self.model_name, contents=prompt
        )
        return response.text or ""


class AnthropicGenerator:
    """Anthropic Messages API."""

    provider = "anthropic"

    def __init__(
        self,
        api_key: str,
        model_name: str = "claude-sonnet-4-20250514",
        max_tokens: int = 2048,
    ):
        self.model_name = model_name
        self.max_tokens = max_tokens
        self._client = anthropic.AsyncAnthropic(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        response = await self._client.messages.create(
            model=self.model_name,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return "".join(
            block.text for block in response.content if block.type == "text"
        )


def build_generator(settings: Settings) -> TextGenerator | None:
    """Construct the configured provider, or None when its API key is unset."""
    provider = settings.llm_provider.lower()
    if provider == "anthropic":
        if not settings.anthropic_api_key:
            logger.warning("LLM_PROVIDER is anthropic but ANTHROPIC_API_KEY is not set")
            return None
        return AnthropicGenerator(
            settings.anthropic_api_key,
            settings.anthropic_model,
            settings.llm_max_tokens,
        )
    if provider != "gemini":
        raise ValueError(f"Unknown LLM_PROVIDER: {settings.llm_provider!r}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; suggestion endpoints will fail")
        return None
    return GeminiGenerator(settings.gemini_api_key, settings.gemini_model)
