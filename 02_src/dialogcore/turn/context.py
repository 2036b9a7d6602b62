"""TurnContext implementation."""

from typing import Any, Protocol

from ..errors import InvalidArgumentError
from ..models import Activity, ActivityTypes


class IBotAdapter(Protocol):
    """Turn transport: delivers outgoing activities to the channel."""

    async def send_activities(
        self, turn_context: "TurnContext", activities: list[Activity]
    ) -> None:
        """Deliver activities produced during a turn."""
        ...


class TurnContext:
    """Context for a single turn of a conversation."""

    def __init__(self, adapter: IBotAdapter, activity: Activity):
        if adapter is None:
            raise InvalidArgumentError("adapter is required")
        if activity is None:
            raise InvalidArgumentError("activity is required")

        self._adapter = adapter
        self._activity = activity
        self._responded = False
        self.turn_state: dict[str, Any] = {}

    @property
    def adapter(self) -> IBotAdapter:
        return self._adapter

    @property
    def activity(self) -> Activity:
        """Incoming activity for this turn."""
        return self._activity

    @property
    def conversation_id(self) -> str:
        """Conversation the incoming activity belongs to."""
        if not self._activity.conversation_id:
            raise InvalidArgumentError("activity.conversation_id is required")
        return self._activity.conversation_id

    @property
    def responded(self) -> bool:
        """Whether at least one message was sent during this turn."""
        return self._responded

    async def send_activity(
        self, activity_or_text: Activity | str, speak: str | None = None
    ) -> Activity:
        """Send a single activity (or plain text) to the user."""
        if isinstance(activity_or_text, str):
            activity = Activity.message(activity_or_text, speak=speak)
        else:
            activity = activity_or_text

        if activity is None:
            raise InvalidArgumentError("activity is required")

        activity.conversation_id = activity.conversation_id or (
            self._activity.conversation_id
        )
        activity.channel_id = self._activity.channel_id
        activity.locale = activity.locale or self._activity.locale

        await self._adapter.send_activities(self, [activity])

        if activity.type == ActivityTypes.MESSAGE:
            self._responded = True

        return activity
