"""Turn transport module."""

from .adapter import BufferedAdapter
from .context import IBotAdapter, TurnContext

__all__ = ["BufferedAdapter", "IBotAdapter", "TurnContext"]
