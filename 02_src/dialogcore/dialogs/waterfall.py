"""WaterfallDialog implementation."""

from typing import Any, Awaitable, Callable

from ..errors import DialogError, InvalidArgumentError
from ..logging_config import get_logger
from ..models import (
    ActivityTypes,
    DialogInstance,
    DialogKind,
    DialogReason,
    DialogState,
    DialogTurnResult,
)
from ..turn import TurnContext
from .dialog import Dialog
from .dialog_context import DialogContext

logger = get_logger(__name__)

WaterfallStep = Callable[["WaterfallStepContext"], Awaitable[DialogTurnResult | None]]

STEP_INDEX = "stepIndex"
OPTIONS = "options"
VALUES = "values"


class WaterfallStepContext(DialogContext):
    """DialogContext handed to a single waterfall step.

    Shares the stack of the context that runs the waterfall, so begin, prompt
    and end calls made by the step act on the real conversation stack.
    """

    def __init__(
        self,
        waterfall: "WaterfallDialog",
        dc: DialogContext,
        options: Any,
        values: dict[str, Any],
        index: int,
        reason: DialogReason,
        result: Any,
    ):
        super().__init__(
            dc.dialogs, dc.context, DialogState(dialog_stack=dc.stack), dc.parent
        )
        self._waterfall = waterfall
        self._options = options
        self._values = values
        self._index = index
        self._reason = reason
        self._result = result
        self._next_called = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def options(self) -> Any:
        """Options the waterfall was begun with."""
        return self._options

    @property
    def reason(self) -> DialogReason:
        return self._reason

    @property
    def result(self) -> Any:
        """Value emitted by the previous step or by the child that just ended."""
        return self._result

    @property
    def values(self) -> dict[str, Any]:
        """Scratch values persisted across the steps of this waterfall."""
        return self._values

    async def send(self, text: str) -> None:
        await self.context.send_activity(text)

    async def next(self, result: Any = None) -> DialogTurnResult:
        """Skip to the next step without waiting for user input."""
        if self._next_called:
            raise DialogError(
                f"WaterfallStepContext.next(): method already called for "
                f"dialog and step: {self._waterfall.id}[{self._index}]"
            )
        self._next_called = True
        return await self._waterfall.resume_dialog(
            self, DialogReason.NEXT_CALLED, result
        )

    async def repeat(self) -> DialogTurnResult:
        """Run the current step again."""
        return await self._waterfall.run_step(
            self, self._index, DialogReason.REPLACE_CALLED, self._result
        )


class WaterfallDialog(Dialog):
    """A dialog made of steps that run one per turn, in order."""

    kind = DialogKind.WATERFALL

    def __init__(self, dialog_id: str, steps: list[WaterfallStep] | None = None):
        super().__init__(dialog_id)
        self._steps: list[WaterfallStep] = []
        for step in steps or []:
            self.add_step(step)

    @property
    def steps(self) -> list[WaterfallStep]:
        return list(self._steps)

    def add_step(self, step: WaterfallStep) -> "WaterfallDialog":
        """Append a step to the waterfall."""
        if step is None:
            raise InvalidArgumentError("step is required")
        self._steps.append(step)
        return self

    def get_version(self) -> str:
        return f"{self.id}:{len(self._steps)}"

    async def begin_dialog(self, dc: DialogContext, options: Any = None) -> DialogTurnResult:
        state = dc.active_dialog.state
        state[OPTIONS] = options
        state[VALUES] = {}
        return await self.run_step(dc, 0, DialogReason.BEGIN_CALLED, None)

    async def continue_dialog(self, dc: DialogContext) -> DialogTurnResult:
        # Only message activities advance a waterfall.
        if dc.context.activity.type != ActivityTypes.MESSAGE:
            return Dialog.END_OF_TURN

        return await self.resume_dialog(
            dc, DialogReason.CONTINUE_CALLED, dc.context.activity.text
        )

    async def resume_dialog(
        self, dc: DialogContext, reason: DialogReason, result: Any = None
    ) -> DialogTurnResult:
        index = dc.active_dialog.state[STEP_INDEX]
        return await self.run_step(dc, index + 1, reason, result)

    async def end_dialog(
        self, turn_context: TurnContext, instance: DialogInstance, reason: DialogReason
    ) -> None:
        logger.debug(
            "Waterfall ended at step %s (%s)",
            instance.state.get(STEP_INDEX),
            reason.value,
            extra={"dialog_id": self.id},
        )

    async def on_step(self, step_context: WaterfallStepContext) -> DialogTurnResult:
        """Invoke the step; a step that returns nothing ends the turn."""
        result = await self._steps[step_context.index](step_context)
        return result if result is not None else Dialog.END_OF_TURN

    async def run_step(
        self, dc: DialogContext, index: int, reason: DialogReason, result: Any
    ) -> DialogTurnResult:
        if index >= len(self._steps):
            # Past the last step: surface the final value to the parent frame.
            return await dc.end_dialog(result)

        state = dc.active_dialog.state
        state[STEP_INDEX] = index
        step_context = WaterfallStepContext(
            self,
            dc,
            state.get(OPTIONS),
            state[VALUES],
            index,
            reason,
            result,
        )
        return await self.on_step(step_context)
