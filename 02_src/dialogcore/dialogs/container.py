"""DialogContainer and ComponentDialog implementations."""

import hashlib
import json
from typing import Any

from ..errors import DialogError
from ..logging_config import get_logger
from ..models import (
    DialogInstance,
    DialogKind,
    DialogReason,
    DialogState,
    DialogTurnResult,
    DialogTurnStatus,
)
from ..turn import TurnContext
from .dialog import Dialog
from .dialog_context import DialogContext
from .dialog_set import DialogSet

logger = get_logger(__name__)

PERSISTED_DIALOG_STATE = "dialogs"


class DialogContainer(Dialog):
    """A dialog that owns a nested set of child dialogs."""

    kind = DialogKind.CONTAINER

    def __init__(self, dialog_id: str):
        super().__init__(dialog_id)
        self._dialogs = DialogSet.for_container()

    @property
    def dialogs(self) -> DialogSet:
        return self._dialogs

    def add_dialog(self, dialog: Dialog) -> "DialogContainer":
        """Register a child dialog."""
        self._dialogs.add(dialog)
        return self

    def find_dialog(self, dialog_id: str) -> Dialog | None:
        return self._dialogs.find(dialog_id)

    def create_child_context(self, dc: DialogContext) -> DialogContext:
        """Context over the inner stack persisted in this container's frame."""
        instance = dc.active_dialog
        state = instance.state.get(PERSISTED_DIALOG_STATE)
        if state is None:
            state = instance.state[PERSISTED_DIALOG_STATE] = DialogState()
        return DialogContext(self._dialogs, dc.context, state, parent=dc)

    async def reprompt_dialog(
        self,
        turn_context: TurnContext,
        instance: DialogInstance,
        parent: DialogContext | None = None,
    ) -> None:
        """Re-render the inner question.

        ``parent`` is the context holding this container's frame; inner
        contexts resolve dialogs through it.
        """
        return None

    async def end_dialog(
        self,
        turn_context: TurnContext,
        instance: DialogInstance,
        reason: DialogReason,
        parent: DialogContext | None = None,
    ) -> None:
        return None

    def get_internal_version(self) -> str:
        """Fingerprint of the container's structure.

        Combines the child dialog versions with the container's own
        ``signature_contribution()`` and hashes the result. Recomputed on
        every call.
        """
        payload = json.dumps(
            [self._dialogs.get_signature(), list(self.signature_contribution())],
            ensure_ascii=False,
            default=str,
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def get_version(self) -> str:
        return f"{self.id}:{self.get_internal_version()}"


class ComponentDialog(DialogContainer):
    """Runs its child dialogs on an inner stack, starting at the initial dialog."""

    def __init__(self, dialog_id: str, initial_dialog_id: str | None = None):
        super().__init__(dialog_id)
        self.initial_dialog_id = initial_dialog_id

    def add_dialog(self, dialog: Dialog) -> "ComponentDialog":
        super().add_dialog(dialog)
        if not self.initial_dialog_id:
            self.initial_dialog_id = dialog.id
        return self

    async def begin_dialog(self, outer_dc: DialogContext, options: Any = None) -> DialogTurnResult:
        inner_dc = self.create_child_context(outer_dc)
        turn_result = await self.on_begin_dialog(inner_dc, options)
        return await self._finish_turn(outer_dc, turn_result)

    async def continue_dialog(self, outer_dc: DialogContext) -> DialogTurnResult:
        inner_dc = self.create_child_context(outer_dc)
        turn_result = await self.on_continue_dialog(inner_dc)
        return await self._finish_turn(outer_dc, turn_result)

    async def resume_dialog(
        self, outer_dc: DialogContext, reason: DialogReason, result: Any = None
    ) -> DialogTurnResult:
        # A dialog pushed onto the outer stack by a child has ended; the
        # inner stack is still waiting for input, so ask it again.
        await self.reprompt_dialog(
            outer_dc.context, outer_dc.active_dialog, parent=outer_dc
        )
        return Dialog.END_OF_TURN

    async def reprompt_dialog(
        self,
        turn_context: TurnContext,
        instance: DialogInstance,
        parent: DialogContext | None = None,
    ) -> None:
        inner_dc = self._inner_context(turn_context, instance, parent)
        await inner_dc.reprompt_dialog()

    async def end_dialog(
        self,
        turn_context: TurnContext,
        instance: DialogInstance,
        reason: DialogReason,
        parent: DialogContext | None = None,
    ) -> None:
        if reason == DialogReason.CANCEL_CALLED:
            inner_dc = self._inner_context(turn_context, instance, parent)
            await inner_dc.cancel_all_dialogs()

    async def on_begin_dialog(self, inner_dc: DialogContext, options: Any) -> DialogTurnResult:
        if not self.initial_dialog_id:
            raise DialogError(f"ComponentDialog {self.id!r} has no initial dialog")
        return await inner_dc.begin_dialog(self.initial_dialog_id, options)

    async def on_continue_dialog(self, inner_dc: DialogContext) -> DialogTurnResult:
        return await inner_dc.continue_dialog()

    async def _finish_turn(
        self, outer_dc: DialogContext, turn_result: DialogTurnResult
    ) -> DialogTurnResult:
        if turn_result.status == DialogTurnStatus.WAITING:
            return Dialog.END_OF_TURN

        logger.debug(
            "Inner stack finished (%s)",
            turn_result.status.value,
            extra={"dialog_id": self.id},
        )
        return await outer_dc.end_dialog(turn_result.result)

    def _inner_context(
        self,
        turn_context: TurnContext,
        instance: DialogInstance,
        parent: DialogContext | None,
    ) -> DialogContext:
        state = instance.state.get(PERSISTED_DIALOG_STATE)
        if state is None:
            state = instance.state[PERSISTED_DIALOG_STATE] = DialogState()
        return DialogContext(self._dialogs, turn_context, state, parent=parent)
