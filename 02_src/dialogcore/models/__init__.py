"""Core data models for the dialog engine."""

from .activity import Activity, ActivityTypes, InputHints
from .choices import Choice, FoundChoice, ListStyle, ModelResult
from .dialog_state import (
    DialogInstance,
    DialogKind,
    DialogReason,
    DialogState,
    DialogTurnResult,
    DialogTurnStatus,
)
from .prompts import PromptOptions, PromptRecognizerResult
from .tracing import TraceEvent

__all__ = [
    # Transport
    "Activity",
    "ActivityTypes",
    "InputHints",
    # Dialog stack
    "DialogInstance",
    "DialogKind",
    "DialogReason",
    "DialogState",
    "DialogTurnResult",
    "DialogTurnStatus",
    # Prompts
    "PromptOptions",
    "PromptRecognizerResult",
    # Choices
    "Choice",
    "FoundChoice",
    "ListStyle",
    "ModelResult",
    # Tracing
    "TraceEvent",
]
