"""Per-conversation state persisted through Storage."""

import asyncio
import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

from ..errors import InvalidArgumentError
from ..logging_config import get_logger
from ..storage import IStorage
from ..turn import TurnContext
from .serialization import decode_value, encode_value

logger = get_logger(__name__)


class CachedState:
    """Conversation blob loaded for the current turn."""

    def __init__(self, state: dict[str, Any], snapshot: str):
        self.state = state
        self.snapshot = snapshot

    def is_changed(self) -> bool:
        return _snapshot(self.state) != self.snapshot


def _snapshot(state: dict[str, Any]) -> str:
    return json.dumps(encode_value(state), sort_keys=True)


class StatePropertyAccessor:
    """Reads and writes one named property of the conversation blob."""

    def __init__(self, conversation_state: "ConversationState", name: str):
        self._conversation_state = conversation_state
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def get(
        self,
        turn_context: TurnContext,
        default_factory: Callable[[], Any] | None = None,
    ) -> Any:
        """Get the property value, creating it with default_factory if absent."""
        state = await self._conversation_state.load(turn_context)
        if self._name not in state and default_factory is not None:
            state[self._name] = default_factory()
        return state.get(self._name)

    async def set(self, turn_context: TurnContext, value: Any) -> None:
        state = await self._conversation_state.load(turn_context)
        state[self._name] = value

    async def delete(self, turn_context: TurnContext) -> None:
        state = await self._conversation_state.load(turn_context)
        state.pop(self._name, None)


class ConversationState:
    """State scoped to a conversation, keyed by conversation id."""

    def __init__(self, storage: IStorage):
        if storage is None:
            raise InvalidArgumentError("storage is required")

        self._storage = storage
        self._cache_key = f"{type(self).__name__}#{id(self)}"
        self._locks: dict[str, _ConversationLock] = {}

    def create_property(self, name: str) -> StatePropertyAccessor:
        """Create an accessor for a named property of the conversation blob."""
        if not name:
            raise InvalidArgumentError("property name is required")
        return StatePropertyAccessor(self, name)

    async def load(self, turn_context: TurnContext, force: bool = False) -> dict:
        """Load the conversation blob into the turn cache."""
        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")

        cached: CachedState | None = turn_context.turn_state.get(self._cache_key)
        if force or cached is None:
            raw = await self._storage.get_conversation_state(
                turn_context.conversation_id
            )
            state = decode_value(raw) if raw else {}
            cached = CachedState(state, _snapshot(state))
            turn_context.turn_state[self._cache_key] = cached
        return cached.state

    async def save_changes(self, turn_context: TurnContext, force: bool = False) -> None:
        """Persist the cached blob if it was changed during the turn."""
        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")

        cached: CachedState | None = turn_context.turn_state.get(self._cache_key)
        if cached is None or not (force or cached.is_changed()):
            return

        await self._storage.save_conversation_state(
            turn_context.conversation_id, encode_value(cached.state)
        )
        cached.snapshot = _snapshot(cached.state)

    async def delete(self, turn_context: TurnContext) -> None:
        """Drop both the cached and the persisted blob."""
        turn_context.turn_state.pop(self._cache_key, None)
        await self._storage.delete_conversation_state(turn_context.conversation_id)

    @property
    def active_conversations(self) -> int:
        """Number of conversations with a turn running or waiting."""
        return len(self._locks)

    @asynccontextmanager
    async def turn(self, turn_context: TurnContext) -> AsyncIterator["ConversationState"]:
        """Hold the conversation for one turn.

        Only one turn per conversation runs inside this block at a time. The
        blob is loaded fresh on entry and persisted on exit, including when
        the turn fails. If saving after a failed turn also fails, the save
        error is logged and the turn's own error propagates.
        """
        if turn_context is None:
            raise InvalidArgumentError("turn_context is required")

        conversation_id = turn_context.conversation_id
        entry = self._locks.get(conversation_id)
        if entry is None:
            entry = self._locks[conversation_id] = _ConversationLock()
        entry.users += 1

        try:
            async with entry.lock:
                await self.load(turn_context, force=True)
                try:
                    yield self
                except BaseException:
                    try:
                        await self.save_changes(turn_context)
                    except Exception:
                        logger.exception(
                            "Failed to save state of a failed turn",
                            extra={"conversation_id": conversation_id},
                        )
                    raise
                await self.save_changes(turn_context)
        finally:
            entry.users -= 1
            if entry.users == 0:
                del self._locks[conversation_id]
            logger.debug(
                "Conversation state released",
                extra={"conversation_id": conversation_id},
            )


class _ConversationLock:
    """Lock of one conversation, counting turns that hold or await it."""

    def __init__(self):
        self.lock = asyncio.Lock()
        self.users = 0
