"""Dialog stack data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DialogTurnStatus(str, Enum):
    """Outcome of a dialog operation for the current turn."""

    EMPTY = "empty"  # no active dialog
    WAITING = "waiting"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class DialogReason(str, Enum):
    """Why a dialog is being begun, resumed or ended."""

    BEGIN_CALLED = "beginCalled"
    CONTINUE_CALLED = "continueCalled"
    END_CALLED = "endCalled"
    REPLACE_CALLED = "replaceCalled"
    CANCEL_CALLED = "cancelCalled"
    NEXT_CALLED = "nextCalled"


class DialogKind(str, Enum):
    """Closed set of dialog variants, recorded on every stack frame."""

    CUSTOM = "custom"
    WATERFALL = "waterfall"
    PROMPT = "prompt"
    CONTAINER = "container"


@dataclass(frozen=True)
class DialogTurnResult:
    """Result returned to the caller of a DialogContext operation."""

    status: DialogTurnStatus
    result: Any = None


@dataclass
class DialogInstance:
    """A single frame on a dialog stack."""

    id: str
    kind: DialogKind = DialogKind.CUSTOM
    state: dict[str, Any] = field(default_factory=dict)


@dataclass
class DialogState:
    """Persisted dialog stack, outermost frame first."""

    dialog_stack: list[DialogInstance] = field(default_factory=list)
