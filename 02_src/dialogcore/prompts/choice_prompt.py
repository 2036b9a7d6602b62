"""ChoicePrompt implementation."""

from dataclasses import replace
from typing import Any

from ..choices import (
    ChoiceFactory,
    ChoiceFactoryOptions,
    FindChoicesOptions,
    PromptCultureModels,
    recognize_choices,
)
from ..models import (
    Activity,
    ActivityTypes,
    FoundChoice,
    ListStyle,
    PromptOptions,
    PromptRecognizerResult,
)
from ..turn import TurnContext
from .prompt import Prompt, PromptValidator


class ChoicePrompt(Prompt[FoundChoice]):
    """Prompts the user to pick one of a list of choices.

    The locale of the incoming activity selects the connectors used to render
    an inline list ("or", "or more", separator); ``default_locale`` is used
    when the activity has none, and English when neither is supported.
    """

    def __init__(
        self,
        dialog_id: str,
        validator: PromptValidator | None = None,
        default_locale: str | None = None,
        choice_defaults: dict[str, ChoiceFactoryOptions] | None = None,
    ):
        super().__init__(dialog_id, validator)
        self.style = ListStyle.AUTO
        self.default_locale = default_locale
        self.choice_options: ChoiceFactoryOptions | None = None
        self.recognizer_options: FindChoicesOptions | None = None
        self._choice_defaults = choice_defaults or {
            culture.locale: ChoiceFactoryOptions.for_locale(culture.locale)
            for culture in PromptCultureModels.get_supported_cultures()
        }

    def determine_culture(self, activity: Activity) -> str:
        culture = PromptCultureModels.map_to_nearest_language(
            activity.locale or self.default_locale
        )
        if not culture or culture not in self._choice_defaults:
            culture = PromptCultureModels.ENGLISH.locale
        return culture

    async def on_prompt(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
        is_retry: bool,
    ) -> None:
        self._check_turn_arguments(turn_context, options)

        culture = self.determine_culture(turn_context.activity)
        choice_options = self.choice_options or self._choice_defaults[culture]
        style = options.style or self.style
        prompt = self._select_prompt(options, is_retry)

        message = ChoiceFactory.render(options.choices, prompt, style, choice_options)
        await turn_context.send_activity(message)

    async def on_recognize(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
    ) -> PromptRecognizerResult[FoundChoice]:
        self._check_turn_arguments(turn_context, options)

        result = PromptRecognizerResult[FoundChoice]()
        activity = turn_context.activity
        if activity.type != ActivityTypes.MESSAGE or not activity.text:
            return result

        recognizer_options = replace(
            self.recognizer_options or FindChoicesOptions(),
            locale=self.determine_culture(activity),
        )
        matches = recognize_choices(activity.text, options.choices, recognizer_options)
        if matches:
            result.succeeded = True
            result.value = matches[0].resolution
        return result
