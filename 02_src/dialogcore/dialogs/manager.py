"""DialogManager implementation."""

from typing import Protocol

from ..errors import InvalidArgumentError
from ..logging_config import get_logger
from ..models import DialogTurnResult, DialogTurnStatus
from ..state import ConversationState
from ..tracker import ITracker
from ..turn import TurnContext
from .dialog import Dialog
from .dialog_set import DialogSet

logger = get_logger(__name__)

DIALOG_STATE_PROPERTY = "DialogState"
DIALOG_VERSION_PROPERTY = "DialogVersion"


class IDialogManager(Protocol):
    """Runs turns of a conversation through a root dialog."""

    async def on_turn(self, turn_context: TurnContext) -> DialogTurnResult:
        """Continue the active dialog, or begin the root dialog."""
        ...


class DialogManager:
    """Runs each turn of a conversation against the root dialog."""

    def __init__(
        self,
        root_dialog: Dialog,
        conversation_state: ConversationState,
        tracker: ITracker | None = None,
    ):
        if root_dialog is None:
            raise InvalidArgumentError("root_dialog is required")
        if conversation_state is None:
            raise InvalidArgumentError("conversation_state is required")

        self._root_dialog = root_dialog
        self._conversation_state = conversation_state
        self._tracker = tracker

        self._dialog_state = conversation_state.create_property(DIALOG_STATE_PROPERTY)
        self._dialog_version = conversation_state.create_property(
            DIALOG_VERSION_PROPERTY
        )
        self._dialogs = DialogSet(self._dialog_state)
        self._dialogs.add(root_dialog)

    @property
    def root_dialog(self) -> Dialog:
        return self._root_dialog

    @property
    def dialogs(self) -> DialogSet:
        return self._dialogs

    async def on_turn(self, turn_context: TurnContext) -> DialogTurnResult:
        """Process one turn while holding the conversation's state."""
        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")

        conversation_id = turn_context.conversation_id
        try:
            async with self._conversation_state.turn(turn_context):
                dc = await self._dialogs.create_context(turn_context)
                await self._check_version(turn_context, dc)

                result = await dc.continue_dialog()
                if result.status == DialogTurnStatus.EMPTY:
                    result = await dc.begin_dialog(self._root_dialog.id)
        except Exception as e:
            logger.error(
                "Turn failed: %s",
                e,
                exc_info=True,
                extra={"conversation_id": conversation_id},
            )
            raise

        logger.info(
            "Turn processed",
            extra={"conversation_id": conversation_id, "turn_status": result.status.value},
        )
        if self._tracker:
            await self._tracker.track(
                event_type="turn_processed",
                actor="dialog_manager",
                data={
                    "conversation_id": conversation_id,
                    "status": result.status.value,
                    "responded": turn_context.responded,
                },
            )
        return result

    async def _check_version(self, turn_context: TurnContext, dc) -> None:
        """Drop a stack that was built against a different dialog structure."""
        current = self._root_dialog.get_version()
        stored = await self._dialog_version.get(turn_context)

        if stored is not None and stored != current and dc.stack:
            logger.warning(
                "Dialog version changed, cancelling active dialogs",
                extra={
                    "conversation_id": turn_context.conversation_id,
                    "dialog_id": self._root_dialog.id,
                },
            )
            await dc.cancel_all_dialogs()
            if self._tracker:
                await self._tracker.track(
                    event_type="dialog_version_changed",
                    actor="dialog_manager",
                    data={
                        "conversation_id": turn_context.conversation_id,
                        "previous_version": stored,
                        "current_version": current,
                    },
                )

        await self._dialog_version.set(turn_context, current)
