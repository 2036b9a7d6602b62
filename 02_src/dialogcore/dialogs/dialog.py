"""Dialog base class."""

from typing import TYPE_CHECKING, Any, ClassVar

from ..errors import InvalidArgumentError
from ..models import (
    DialogInstance,
    DialogKind,
    DialogReason,
    DialogTurnResult,
    DialogTurnStatus,
)
from ..turn import TurnContext

if TYPE_CHECKING:
    from .dialog_context import DialogContext


class Dialog:
    """Base class for all dialogs.

    Every dialog exposes the same capability set: begin, continue, resume,
    reprompt and end. ``kind`` tags the variant and is copied onto each
    stack frame the dialog owns.
    """

    kind: ClassVar[DialogKind] = DialogKind.CUSTOM

    END_OF_TURN = DialogTurnResult(DialogTurnStatus.WAITING)

    def __init__(self, dialog_id: str):
        if not dialog_id or not isinstance(dialog_id, str):
            raise InvalidArgumentError("dialog_id is required")
        self._id = dialog_id

    @property
    def id(self) -> str:
        return self._id

    async def begin_dialog(
        self, dc: "DialogContext", options: Any = None
    ) -> DialogTurnResult:
        """Called when the dialog is started and pushed onto the stack."""
        raise NotImplementedError

    async def continue_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        """Called when the dialog is the active dialog and the user replied.

        By default the dialog ends, surfacing no result.
        """
        return await dc.end_dialog(None)

    async def resume_dialog(
        self, dc: "DialogContext", reason: DialogReason, result: Any = None
    ) -> DialogTurnResult:
        """Called when a child dialog ended and this dialog is active again.

        By default the dialog ends, passing the child's result to its parent.
        """
        return await dc.end_dialog(result)

    async def reprompt_dialog(
        self, turn_context: TurnContext, instance: DialogInstance
    ) -> None:
        """Re-render the last question, if the dialog asks one."""
        return None

    async def end_dialog(
        self, turn_context: TurnContext, instance: DialogInstance, reason: DialogReason
    ) -> None:
        """Called when the dialog's frame is popped from the stack."""
        return None

    def signature_contribution(self) -> list[str]:
        """Extra fields folded into the owning container's fingerprint."""
        return []

    def get_version(self) -> str:
        """Structural signature of this dialog."""
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
