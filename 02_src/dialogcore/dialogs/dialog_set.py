"""DialogSet implementation."""

import hashlib
import json
from typing import TYPE_CHECKING, Iterator

from ..errors import DuplicateIdError, InvalidArgumentError
from ..logging_config import get_logger
from ..models import DialogState
from ..turn import TurnContext
from .dialog import Dialog

if TYPE_CHECKING:
    from ..state import StatePropertyAccessor
    from .dialog_context import DialogContext

logger = get_logger(__name__)

# Marks a set owned by a container, which keeps its stack in a parent frame.
_CONTAINER_OWNED = object()


class DialogSet:
    """Registry of dialogs addressable by id."""

    def __init__(self, dialog_state: "StatePropertyAccessor | object" = _CONTAINER_OWNED):
        if dialog_state is None:
            raise InvalidArgumentError("dialog_state is required")

        self._dialog_state = None if dialog_state is _CONTAINER_OWNED else dialog_state
        self._dialogs: dict[str, Dialog] = {}

    @classmethod
    def for_container(cls) -> "DialogSet":
        """Create a set whose stack lives inside a container's frame."""
        return cls(_CONTAINER_OWNED)

    def add(self, dialog: Dialog) -> "DialogSet":
        """Register a dialog under its id."""
        if dialog is None or not isinstance(dialog, Dialog):
            raise InvalidArgumentError("dialog is required")
        if not dialog.id:
            raise InvalidArgumentError("dialog.id is required")
        if dialog.id in self._dialogs:
            raise DuplicateIdError(dialog.id)

        self._dialogs[dialog.id] = dialog
        logger.debug("Registered dialog %s", dialog.id)
        return self

    def find(self, dialog_id: str) -> Dialog | None:
        """Return the registered dialog or None."""
        if not dialog_id:
            return None
        return self._dialogs.get(dialog_id)

    async def create_context(self, turn_context: TurnContext) -> "DialogContext":
        """Create a DialogContext over the conversation's persisted stack."""
        from .dialog_context import DialogContext

        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")
        if self._dialog_state is None:
            raise InvalidArgumentError(
                "DialogSet.create_context(): the set has no dialog state "
                "property; contexts for container-owned sets are created by "
                "the container"
            )

        state = await self._dialog_state.get(turn_context, DialogState)
        return DialogContext(self, turn_context, state)

    def get_signature(self) -> list[str]:
        """Versions of every registered dialog, ordered by id.

        Ordering by id makes the signature depend only on which dialogs are
        registered, not on the order they were added in.
        """
        return [
            self._dialogs[dialog_id].get_version()
            for dialog_id in sorted(self._dialogs)
        ]

    def get_version(self) -> str:
        """Digest of ``get_signature``."""
        payload = json.dumps(self.get_signature(), ensure_ascii=False)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def __iter__(self) -> Iterator[Dialog]:
        return iter(self._dialogs.values())

    def __len__(self) -> int:
        return len(self._dialogs)

    def __contains__(self, dialog_id: object) -> bool:
        return dialog_id in self._dialogs
