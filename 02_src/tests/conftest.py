"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest_asyncio.fixture
async def storage():
    """Create in-memory storage for testing."""
    from dialogcore.storage import Storage

    st = Storage(":memory:")
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def tracker(storage):
    """Create Tracker with storage."""
    from dialogcore.tracker import Tracker

    return Tracker(storage)


@pytest.fixture
def conversation_state(storage):
    """Create ConversationState backed by in-memory storage."""
    from dialogcore.state import ConversationState

    return ConversationState(storage)


@pytest.fixture
def adapter():
    """Create a TestAdapter for an English conversation."""
    from dialogcore.testing import TestAdapter

    return TestAdapter(locale="en-us")


@pytest.fixture
def make_turn_context():
    """Build TurnContexts for hand-driven turns."""
    from dialogcore.models import Activity
    from dialogcore.testing import TestAdapter
    from dialogcore.turn import TurnContext

    def _make(text: str = "hi", conversation_id: str = "conv-1", adapter=None):
        activity = Activity.message(text)
        activity.conversation_id = conversation_id
        activity.locale = "en-us"
        return TurnContext(adapter or TestAdapter(), activity)

    return _make
