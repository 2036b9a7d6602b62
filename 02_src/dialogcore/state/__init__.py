"""Conversation state module."""

from .conversation_state import ConversationState, StatePropertyAccessor
from .serialization import decode_value, encode_value

__all__ = [
    "ConversationState",
    "StatePropertyAccessor",
    "decode_value",
    "encode_value",
]
