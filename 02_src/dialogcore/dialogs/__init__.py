"""Dialog engine: dialogs, sets, contexts and containers."""

from .container import ComponentDialog, DialogContainer
from .dialog import Dialog
from .dialog_context import DialogContext
from .dialog_set import DialogSet
from .manager import DialogManager, IDialogManager
from .waterfall import WaterfallDialog, WaterfallStep, WaterfallStepContext

__all__ = [
    "ComponentDialog",
    "Dialog",
    "DialogContainer",
    "DialogContext",
    "DialogManager",
    "DialogSet",
    "IDialogManager",
    "WaterfallDialog",
    "WaterfallStep",
    "WaterfallStepContext",
]
