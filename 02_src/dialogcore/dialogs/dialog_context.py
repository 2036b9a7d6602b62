"""DialogContext implementation."""

from typing import Any

from ..errors import DialogNotFoundError, InvalidArgumentError
from ..logging_config import get_logger
from ..models import (
    DialogInstance,
    DialogKind,
    DialogReason,
    DialogState,
    DialogTurnResult,
    DialogTurnStatus,
    PromptOptions,
)
from ..turn import TurnContext
from .dialog import Dialog
from .dialog_set import DialogSet

logger = get_logger(__name__)


class DialogContext:
    """Runs one turn against a conversation's dialog stack.

    The stack is stored outermost frame first, so the active dialog is the
    last frame. Every operation resolves dialog ids through the bound
    DialogSet and then through parent contexts.
    """

    def __init__(
        self,
        dialogs: DialogSet,
        turn_context: TurnContext,
        state: DialogState,
        parent: "DialogContext | None" = None,
    ):
        if dialogs is None:
            raise InvalidArgumentError("dialogs is required")
        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")
        if state is None:
            raise InvalidArgumentError("state is required")

        self._dialogs = dialogs
        self._context = turn_context
        self._state = state
        self._parent = parent

    @property
    def dialogs(self) -> DialogSet:
        return self._dialogs

    @property
    def context(self) -> TurnContext:
        return self._context

    @property
    def parent(self) -> "DialogContext | None":
        return self._parent

    @property
    def stack(self) -> list[DialogInstance]:
        return self._state.dialog_stack

    @property
    def active_dialog(self) -> DialogInstance | None:
        """Top-of-stack frame, or None when nothing is running."""
        return self.stack[-1] if self.stack else None

    @property
    def child(self) -> "DialogContext | None":
        """Context of the active container's inner stack, if any."""
        instance = self.active_dialog
        if instance is None or instance.kind != DialogKind.CONTAINER:
            return None
        dialog = self.find_dialog(instance.id)
        if dialog is None:
            return None
        return dialog.create_child_context(self)

    def find_dialog(self, dialog_id: str) -> Dialog | None:
        """Resolve a dialog in this set, then in parent contexts."""
        dialog = self._dialogs.find(dialog_id)
        if dialog is None and self._parent is not None:
            dialog = self._parent.find_dialog(dialog_id)
        return dialog

    async def begin_dialog(self, dialog_id: str, options: Any = None) -> DialogTurnResult:
        """Push a new frame for dialog_id and start the dialog."""
        if not dialog_id:
            raise InvalidArgumentError("dialog_id is required")

        dialog = self.find_dialog(dialog_id)
        if dialog is None:
            raise DialogNotFoundError(dialog_id, "begin_dialog")

        self.stack.append(DialogInstance(id=dialog_id, kind=dialog.kind))
        logger.debug(
            "Dialog pushed (depth %d)",
            len(self.stack),
            extra={"dialog_id": dialog_id},
        )
        return await dialog.begin_dialog(self, options)

    async def prompt(self, dialog_id: str, options: PromptOptions) -> DialogTurnResult:
        """Begin a prompt dialog with the given options."""
        if not dialog_id:
            raise InvalidArgumentError("dialog_id is required")
        if options is None:
            raise InvalidArgumentError("options is required")

        return await self.begin_dialog(dialog_id, options)

    async def continue_dialog(self) -> DialogTurnResult:
        """Resume the active dialog with the current turn's input."""
        instance = self.active_dialog
        if instance is None:
            return DialogTurnResult(DialogTurnStatus.EMPTY)

        dialog = self.find_dialog(instance.id)
        if dialog is None:
            raise DialogNotFoundError(instance.id, "continue_dialog")

        return await dialog.continue_dialog(self)

    async def end_dialog(self, result: Any = None) -> DialogTurnResult:
        """Pop the active frame and hand result to the parent frame."""
        await self._end_active_dialog(DialogReason.END_CALLED)

        instance = self.active_dialog
        if instance is None:
            return DialogTurnResult(DialogTurnStatus.COMPLETE, result)

        dialog = self.find_dialog(instance.id)
        if dialog is None:
            raise DialogNotFoundError(instance.id, "end_dialog")

        return await dialog.resume_dialog(self, DialogReason.END_CALLED, result)

    async def replace_dialog(self, dialog_id: str, options: Any = None) -> DialogTurnResult:
        """End the active dialog and begin another one in its place."""
        await self._end_active_dialog(DialogReason.REPLACE_CALLED)
        return await self.begin_dialog(dialog_id, options)

    async def cancel_all_dialogs(self) -> DialogTurnResult:
        """End every frame on the stack."""
        if not self.stack:
            return DialogTurnResult(DialogTurnStatus.EMPTY)

        while self.stack:
            await self._end_active_dialog(DialogReason.CANCEL_CALLED)

        return DialogTurnResult(DialogTurnStatus.CANCELLED)

    async def reprompt_dialog(self) -> None:
        """Ask the active dialog to render its question again."""
        instance = self.active_dialog
        if instance is None:
            return

        dialog = self.find_dialog(instance.id)
        if dialog is None:
            raise DialogNotFoundError(instance.id, "reprompt_dialog")

        if dialog.kind == DialogKind.CONTAINER:
            await dialog.reprompt_dialog(self._context, instance, parent=self)
        else:
            await dialog.reprompt_dialog(self._context, instance)

    async def _end_active_dialog(self, reason: DialogReason) -> None:
        instance = self.active_dialog
        if instance is None:
            return

        dialog = self.find_dialog(instance.id)
        if dialog is None:
            logger.warning(
                "No dialog registered for popped frame (%s)",
                reason.value,
                extra={"dialog_id": instance.id},
            )
        elif dialog.kind == DialogKind.CONTAINER:
            await dialog.end_dialog(self._context, instance, reason, parent=self)
        else:
            await dialog.end_dialog(self._context, instance, reason)

        self.stack.pop()
        logger.debug(
            "Dialog popped (%s)",
            reason.value,
            extra={"dialog_id": instance.id},
        )
