"""Prompt base class."""

from dataclasses import replace
from typing import Any, Awaitable, Callable, Generic, TypeVar

from ..dialogs import Dialog, DialogContext
from ..errors import InvalidArgumentError
from ..logging_config import get_logger
from ..models import (
    Activity,
    ActivityTypes,
    DialogInstance,
    DialogKind,
    DialogReason,
    DialogTurnResult,
    InputHints,
    PromptOptions,
    PromptRecognizerResult,
)
from ..turn import TurnContext

logger = get_logger(__name__)

T = TypeVar("T")

PERSISTED_OPTIONS = "options"
PERSISTED_STATE = "state"
ATTEMPT_COUNT_KEY = "attemptCount"


def _expecting_input(activity: Activity | None) -> Activity | None:
    if activity is None or activity.input_hint is not None:
        return activity
    return replace(activity, input_hint=InputHints.EXPECTING_INPUT)


class PromptValidatorContext(Generic[T]):
    """What a validator sees when deciding whether to accept the input."""

    def __init__(
        self,
        turn_context: TurnContext,
        recognized: PromptRecognizerResult[T],
        state: dict[str, Any],
        options: PromptOptions,
    ):
        self.context = turn_context
        self.recognized = recognized
        self.state = state
        self.options = options

    @property
    def attempt_count(self) -> int:
        """Number of recognition attempts so far, this one included."""
        return self.state.get(ATTEMPT_COUNT_KEY, 0)


PromptValidator = Callable[[PromptValidatorContext], Awaitable[bool]]


class Prompt(Dialog, Generic[T]):
    """A dialog that asks a question and recognizes the answer.

    Subclasses render the question in ``on_prompt`` and parse the reply in
    ``on_recognize``. A failed recognition is not an error: the prompt asks
    again (using the retry prompt when one is set) and keeps waiting.
    """

    kind = DialogKind.PROMPT

    def __init__(self, dialog_id: str, validator: PromptValidator | None = None):
        super().__init__(dialog_id)
        self._validator = validator

    async def begin_dialog(self, dc: DialogContext, options: Any = None) -> DialogTurnResult:
        if not isinstance(options, PromptOptions):
            raise InvalidArgumentError(
                f"Prompt options are required for Prompt dialogs, got "
                f"{type(options).__name__}"
            )

        # Hint a copy; the caller's activities stay untouched.
        options = replace(
            options,
            prompt=_expecting_input(options.prompt),
            retry_prompt=_expecting_input(options.retry_prompt),
        )

        state = dc.active_dialog.state
        state[PERSISTED_OPTIONS] = options.to_dict()
        state[PERSISTED_STATE] = {ATTEMPT_COUNT_KEY: 0}

        await self.on_prompt(dc.context, state[PERSISTED_STATE], options, False)
        return Dialog.END_OF_TURN

    async def continue_dialog(self, dc: DialogContext) -> DialogTurnResult:
        if dc is None or dc.active_dialog is None:
            raise InvalidArgumentError("continue_dialog requires an active prompt")

        # Ignore anything that is not a message.
        if dc.context.activity.type != ActivityTypes.MESSAGE:
            return Dialog.END_OF_TURN

        instance = dc.active_dialog
        state = instance.state[PERSISTED_STATE]
        options = PromptOptions.from_dict(instance.state[PERSISTED_OPTIONS])

        recognized = await self.on_recognize(dc.context, state, options)
        state[ATTEMPT_COUNT_KEY] = state.get(ATTEMPT_COUNT_KEY, 0) + 1

        is_valid = False
        if self._validator is not None:
            prompt_context = PromptValidatorContext(
                dc.context, recognized, state, options
            )
            is_valid = await self._validator(prompt_context)
        elif recognized.succeeded:
            is_valid = True

        if is_valid:
            return await dc.end_dialog(recognized.value)

        logger.debug(
            "Input not accepted (attempt %d)",
            state[ATTEMPT_COUNT_KEY],
            extra={"dialog_id": self.id},
        )
        if not dc.context.responded:
            await self.on_prompt(dc.context, state, options, True)

        return Dialog.END_OF_TURN

    async def resume_dialog(
        self, dc: DialogContext, reason: DialogReason, result: Any = None
    ) -> DialogTurnResult:
        # Prompts don't start children; if one ended above us, ask again.
        await self.reprompt_dialog(dc.context, dc.active_dialog)
        return Dialog.END_OF_TURN

    async def reprompt_dialog(
        self, turn_context: TurnContext, instance: DialogInstance
    ) -> None:
        state = instance.state[PERSISTED_STATE]
        options = PromptOptions.from_dict(instance.state[PERSISTED_OPTIONS])
        await self.on_prompt(turn_context, state, options, False)

    async def on_prompt(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
        is_retry: bool,
    ) -> None:
        """Send the prompt (or retry prompt) to the user."""
        raise NotImplementedError

    async def on_recognize(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
    ) -> PromptRecognizerResult[T]:
        """Try to recognize the expected value in the current activity."""
        raise NotImplementedError

    @staticmethod
    def _check_turn_arguments(turn_context: TurnContext, options: PromptOptions) -> None:
        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")
        if options is None:
            raise InvalidArgumentError("options is required")

    @staticmethod
    def _select_prompt(options: PromptOptions, is_retry: bool):
        if is_retry and options.retry_prompt is not None:
            return options.retry_prompt
        return options.prompt
