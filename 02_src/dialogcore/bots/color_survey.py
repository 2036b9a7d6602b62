"""Sample survey dialog served by the application host."""

from ..dialogs import ComponentDialog, WaterfallDialog, WaterfallStepContext
from ..models import Choice, DialogTurnResult, ListStyle, PromptOptions
from ..prompts import ChoicePrompt, ConfirmPrompt

COLORS = ["red", "green", "blue"]


class ColorSurveyDialog(ComponentDialog):
    """Asks for a favorite color, then offers to ask again."""

    def __init__(self, dialog_id: str = "colorSurvey", default_locale: str | None = None):
        super().__init__(dialog_id)

        self.add_dialog(
            WaterfallDialog(
                "surveySteps",
                [self.ask_color, self.acknowledge_color, self.confirm_more, self.finish],
            )
        )
        self.add_dialog(ChoicePrompt("ChoicePrompt", default_locale=default_locale))
        self.add_dialog(ConfirmPrompt("ConfirmPrompt", default_locale=default_locale))
        self.initial_dialog_id = "surveySteps"

    async def ask_color(self, step: WaterfallStepContext) -> DialogTurnResult:
        return await step.prompt(
            "ChoicePrompt",
            PromptOptions(
                prompt="favorite color?",
                retry_prompt="Please pick one of the listed colors.",
                choices=[Choice(value=color) for color in COLORS],
                style=ListStyle.INLINE,
            ),
        )

    async def acknowledge_color(self, step: WaterfallStepContext) -> DialogTurnResult:
        color = step.result.value
        step.values["color"] = color
        await step.send(f"Bot received the choice '{color}'.")
        return await step.next()

    async def confirm_more(self, step: WaterfallStepContext) -> DialogTurnResult:
        return await step.prompt(
            "ConfirmPrompt", PromptOptions(prompt="Would you like to pick again?")
        )

    async def finish(self, step: WaterfallStepContext) -> DialogTurnResult:
        if step.result:
            return await step.replace_dialog("surveySteps")
        await step.send("Thanks for answering!")
        return await step.end_dialog(step.values["color"])
