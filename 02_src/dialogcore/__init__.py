"""Dialog orchestration engine."""

from .app import Application, IApplication, MessageResult
from .dialogs import (
    ComponentDialog,
    Dialog,
    DialogContainer,
    DialogContext,
    DialogManager,
    DialogSet,
    IDialogManager,
    WaterfallDialog,
    WaterfallStepContext,
)
from .errors import (
    DialogError,
    DialogNotFoundError,
    DuplicateIdError,
    InvalidArgumentError,
)
from .models import (
    Activity,
    ActivityTypes,
    Choice,
    DialogInstance,
    DialogReason,
    DialogState,
    DialogTurnResult,
    DialogTurnStatus,
    InputHints,
    ListStyle,
    PromptOptions,
    TraceEvent,
)
from .prompts import (
    ChoicePrompt,
    ConfirmPrompt,
    NumberPrompt,
    Prompt,
    PromptValidatorContext,
    TextPrompt,
)
from .state import ConversationState
from .storage import IStorage, Storage
from .tracker import ITracker, Tracker
from .turn import IBotAdapter, TurnContext

__all__ = [
    # Application
    "Application",
    "IApplication",
    "MessageResult",
    # Dialogs
    "ComponentDialog",
    "Dialog",
    "DialogContainer",
    "DialogContext",
    "DialogManager",
    "DialogSet",
    "IDialogManager",
    "WaterfallDialog",
    "WaterfallStepContext",
    # Prompts
    "ChoicePrompt",
    "ConfirmPrompt",
    "NumberPrompt",
    "Prompt",
    "PromptValidatorContext",
    "TextPrompt",
    # Models
    "Activity",
    "ActivityTypes",
    "Choice",
    "DialogInstance",
    "DialogReason",
    "DialogState",
    "DialogTurnResult",
    "DialogTurnStatus",
    "InputHints",
    "ListStyle",
    "PromptOptions",
    "TraceEvent",
    # Errors
    "DialogError",
    "DialogNotFoundError",
    "DuplicateIdError",
    "InvalidArgumentError",
    # Components
    "ConversationState",
    "IBotAdapter",
    "IStorage",
    "ITracker",
    "Storage",
    "Tracker",
    "TurnContext",
]
