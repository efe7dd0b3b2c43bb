"""Cooking time inference using LLMs with web search."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from butta_la_pasta.domain.cooking import CookingTimes
from butta_la_pasta.domain.errors import InferenceError
from butta_la_pasta.services.text import strip_code_fence

_logger = logging.getLogger(__name__)

_PROMPT_TEMPLATE = """\
Given this pasta product: "{name}", use web search to find the recommended \
cooking time and al dente cooking time in minutes.
Return ONLY a JSON object with this exact structure:
{{
  "cooking_time_minutes": <integer>,
  "al_dente_time_minutes": <integer or null>
}}

If al dente time is unknown or not applicable, use null."""


class InferenceClient(Protocol):
    """Interface for single-turn LLM completions."""

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        web_search: bool,
        store: bool,
    ) -> str:
        """Return the raw response text for a prompt."""


@dataclass
class CookingTimesService:
    """Service that prompts for cooking times and validates the answer."""

    client: InferenceClient
    model: str
    store: bool = False
    timeout_seconds: float = 30.0

    async def infer(self, display_name: str) -> CookingTimes:
        """Infer cooking times for a product name.

        Any failure, including a timeout or an answer that does not match
        the expected structure, raises InferenceError.
        """
        prompt = build_prompt(display_name)
        try:
            async with asyncio.timeout(self.timeout_seconds):
                content = await self.client.complete(
                    model=self.model,
                    prompt=prompt,
                    web_search=True,
                    store=self.store,
                )
        except Exception as exc:
            raise InferenceError(f"inference request failed: {exc!r}") from exc

        try:
            return CookingTimes.model_validate_json(strip_code_fence(content))
        except ValueError as exc:
            _logger.debug("Unparsable inference output: %r", content)
            raise InferenceError(f"failed to parse cooking times: {exc}") from exc


def build_prompt(display_name: str) -> str:
    """Build the cooking time prompt for a product name."""
    return _PROMPT_TEMPLATE.format(name=display_name)
