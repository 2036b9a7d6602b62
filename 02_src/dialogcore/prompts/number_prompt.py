"""NumberPrompt implementation."""

import re
from typing import Any

from ..models import ActivityTypes, PromptOptions, PromptRecognizerResult
from ..turn import TurnContext
from .prompt import Prompt

_NUMBER_PATTERN = re.compile(r"[-+]?\d{1,3}(?:,\d{3})+(?:\.\d+)?|[-+]?\d+(?:\.\d+)?")


def parse_number(text: str | None) -> int | float | None:
    """Return the first number found in text (``1,200.5`` style)."""
    if not text:
        return None
    match = _NUMBER_PATTERN.search(text)
    if match is None:
        return None
    raw = match.group(0).replace(",", "")
    return float(raw) if "." in raw else int(raw)


class NumberPrompt(Prompt[int | float]):
    """Prompts the user for a number."""

    async def on_prompt(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
        is_retry: bool,
    ) -> None:
        self._check_turn_arguments(turn_context, options)

        prompt = self._select_prompt(options, is_retry)
        if prompt is not None:
            await turn_context.send_activity(prompt)

    async def on_recognize(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
    ) -> PromptRecognizerResult[int | float]:
        self._check_turn_arguments(turn_context, options)

        result = PromptRecognizerResult[int | float]()
        if turn_context.activity.type == ActivityTypes.MESSAGE:
            value = parse_number(turn_context.activity.text)
            if value is not None:
                result.succeeded = True
                result.value = value
        return result
