"""ConfirmPrompt implementation."""

from typing import Any

from ..choices import (
    ChoiceFactory,
    ChoiceFactoryOptions,
    FindChoicesOptions,
    PromptCultureModels,
    recognize_choices,
)
from ..models import (
    ActivityTypes,
    Choice,
    ListStyle,
    PromptOptions,
    PromptRecognizerResult,
)
from ..turn import TurnContext
from .prompt import Prompt, PromptValidator

_ENGLISH_YES = ["y", "yes", "yeah", "yep", "sure", "ok", "okay", "true"]
_ENGLISH_NO = ["n", "no", "nope", "nah", "false"]


class ConfirmPrompt(Prompt[bool]):
    """Prompts the user to confirm with a yes or no answer."""

    def __init__(
        self,
        dialog_id: str,
        validator: PromptValidator | None = None,
        default_locale: str | None = None,
        style: ListStyle = ListStyle.AUTO,
    ):
        super().__init__(dialog_id, validator)
        self.default_locale = default_locale
        self.style = style
        self.choice_options: ChoiceFactoryOptions | None = None

    def _culture(self, turn_context: TurnContext):
        return PromptCultureModels.get_culture(
            turn_context.activity.locale or self.default_locale
        )

    def confirm_choices(self, turn_context: TurnContext) -> tuple[Choice, Choice]:
        culture = self._culture(turn_context)
        yes_synonyms, no_synonyms = [], []
        if culture.locale == PromptCultureModels.ENGLISH.locale:
            yes_synonyms, no_synonyms = list(_ENGLISH_YES), list(_ENGLISH_NO)
        return (
            Choice(value=culture.yes_in_language, synonyms=yes_synonyms),
            Choice(value=culture.no_in_language, synonyms=no_synonyms),
        )

    async def on_prompt(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
        is_retry: bool,
    ) -> None:
        self._check_turn_arguments(turn_context, options)

        culture = self._culture(turn_context)
        choice_options = self.choice_options or ChoiceFactoryOptions.for_locale(
            culture.locale
        )
        choices = list(self.confirm_choices(turn_context))
        prompt = self._select_prompt(options, is_retry)
        message = ChoiceFactory.render(
            choices, prompt, options.style or self.style, choice_options
        )
        await turn_context.send_activity(message)

    async def on_recognize(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
    ) -> PromptRecognizerResult[bool]:
        self._check_turn_arguments(turn_context, options)

        result = PromptRecognizerResult[bool]()
        activity = turn_context.activity
        if activity.type != ActivityTypes.MESSAGE or not activity.text:
            return result

        yes, no = self.confirm_choices(turn_context)
        matches = recognize_choices(
            activity.text,
            [yes, no],
            FindChoicesOptions(locale=self._culture(turn_context).locale),
        )
        if matches:
            result.succeeded = True
            result.value = matches[0].resolution.index == 0
        return result
