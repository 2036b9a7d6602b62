"""TextPrompt implementation."""

from typing import Any

from ..models import ActivityTypes, PromptOptions, PromptRecognizerResult
from ..turn import TurnContext
from .prompt import Prompt


class TextPrompt(Prompt[str]):
    """Prompts the user for free-form text."""

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
    ) -> PromptRecognizerResult[str]:
        self._check_turn_arguments(turn_context, options)

        result = PromptRecognizerResult[str]()
        activity = turn_context.activity
        if activity.type == ActivityTypes.MESSAGE and activity.text and activity.text.strip():
            result.succeeded = True
            result.value = activity.text
        return result
