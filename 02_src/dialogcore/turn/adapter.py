"""Adapter that buffers replies for request/response transports."""

from ..models import Activity
from .context import TurnContext

REPLIES_KEY = "BufferedAdapter.replies"


class BufferedAdapter:
    """Collects the activities sent during a turn on the turn context.

    HTTP callers get every reply of a turn in a single response, so nothing
    is delivered while the turn runs.
    """

    async def send_activities(
        self, turn_context: TurnContext, activities: list[Activity]
    ) -> None:
        turn_context.turn_state.setdefault(REPLIES_KEY, []).extend(activities)

    @staticmethod
    def replies(turn_context: TurnContext) -> list[Activity]:
        """Activities sent so far during the turn."""
        return list(turn_context.turn_state.get(REPLIES_KEY, []))
