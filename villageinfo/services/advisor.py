"""Development suggestions, sector scores and progress trends from the LLM.

Each operation builds one prompt, makes exactly one ``generate`` call and
returns the text or its parsed JSON. There is no retry: any provider error,
empty reply or unparseable JSON becomes an ``UpstreamError``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from villageinfo.errors import UpstreamError
from villageinfo.services import prompts
from villageinfo.services.generator import TextGenerator
from villageinfo.services.metrics import metrics

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^\s*```[\w-]*[ \t]*\n?(.*?)\n?```\s*$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if the model added one."""
    match = _FENCE_RE.match(text)
    return (match.group(1) if match else text).strip()


def parse_model_json(text: str) -> Any:
    """Parse model output as JSON after stripping Markdown fences.

    Raises ValueError (json.JSONDecodeError) when the text is not JSON.
    """
    return json.loads(strip_code_fences(text))


class DevelopmentAdvisor:
    def __init__(self, generator: TextGenerator | None):
        self.generator = generator

    async def _ask(self, prompt: str, operation: str, failure: str) -> str:
        if self.generator is None:
            logger.error("%s requested but no LLM API key is configured", operation)
            metrics.inc_upstream(False)
            raise UpstreamError(failure)
        try:
            text = await self.generator.generate(prompt)
        except Exception as exc:
            logger.exception("LLM call failed during %s: %s", operation, exc)
            metrics.inc_upstream(False)
            raise UpstreamError(failure) from exc
        if not text:
            logger.error("LLM returned an empty response during %s", operation)
            metrics.inc_upstream(False)
            raise UpstreamError(failure)
        metrics.inc_upstream(True)
        return text

    async def _ask_json(self, prompt: str, operation: str, failure: str) -> Any:
        text = await self._ask(prompt, operation, failure)
        try:
            return parse_model_json(text)
        except ValueError as exc:
            logger.error(
                "LLM returned non-JSON output during %s: %s (%.200r)",
                operation,
                exc,
                text,
            )
            raise UpstreamError(failure) from exc

    async def suggest(self, village, block, district, state, facilities=None) -> str:
        """Free-text bullet-point suggestions."""
        prompt = prompts.build_suggestion_prompt(village, block, district, state, facilities)
        return await self._ask(prompt, "suggestions", "Failed to fetch suggestions.")

    async def suggest_structured(
        self, village, block, district, state, facilities=None
    ) -> Any:
        """Suggestions as a parsed ``[{title, points[]}]`` array."""
        prompt = prompts.build_structured_prompt(village, block, district, state, facilities)
        return await self._ask_json(
            prompt, "structured suggestions", "Failed to fetch suggestions."
        )

    async def score_sectors(self, village, block, district, state, facilities=None) -> Any:
        prompt = prompts.build_score_prompt(village, block, district, state, facilities)
        return await self._ask_json(prompt, "sector scores", "Failed to fetch scores.")

    async def simulate_progress(
        self, village, block, district, state, facilities=None
    ) -> Any:
        prompt = prompts.build_progress_prompt(village, block, district, state, facilities)
        return await self._ask_json(prompt, "progress trend", "Failed to fetch progress.")
