"""Tests for Application."""

import pytest

from dialogcore.app import Application
from dialogcore.bots import ColorSurveyDialog
from dialogcore.models import DialogTurnStatus, InputHints


@pytest.fixture
async def application():
    app = Application(db_path=":memory:", default_locale="en-us")
    await app.start()
    yield app
    await app.stop()


class TestApplicationLifecycle:
    """Tests for start/stop."""

    async def test_start_initializes_components(self, application):
        """Test that start wires components in dependency order."""
        assert application.storage is not None
        assert application.tracker is not None
        assert isinstance(application.dialog_manager.root_dialog, ColorSurveyDialog)
        assert application._conversation_state is not None

    async def test_properties_before_start_raise(self):
        """Test accessing components before start fails."""
        app = Application(db_path=":memory:")

        with pytest.raises(RuntimeError, match="Application not started"):
            _ = app.storage
        with pytest.raises(RuntimeError, match="Application not started"):
            _ = app.dialog_manager

    async def test_stop_closes_storage(self):
        """Test that stop releases components."""
        app = Application(db_path=":memory:")
        await app.start()
        await app.stop()

        with pytest.raises(RuntimeError):
            _ = app.storage


class TestApplicationMessages:
    """Tests for handle_message()."""

    async def test_color_survey_conversation(self, application):
        """Test the sample survey from greeting to thanks."""
        first = await application.handle_message("conv-1", "hello")
        assert first.status == DialogTurnStatus.WAITING
        assert [r.text for r in first.replies] == [
            "favorite color? (1) red, (2) green, or (3) blue"
        ]
        assert first.replies[0].input_hint == InputHints.EXPECTING_INPUT

        second = await application.handle_message("conv-1", "green")
        assert [r.text for r in second.replies] == [
            "Bot received the choice 'green'.",
            "Would you like to pick again? (1) Yes or (2) No",
        ]

        third = await application.handle_message("conv-1", "no")
        assert third.status == DialogTurnStatus.COMPLETE
        assert third.replies[-1].text == "Thanks for answering!"

    async def test_pick_again_loops(self, application):
        """Test answering yes asks for a color again."""
        await application.handle_message("conv-1", "hello")
        await application.handle_message("conv-1", "red")

        again = await application.handle_message("conv-1", "yes")

        assert [r.text for r in again.replies] == [
            "favorite color? (1) red, (2) green, or (3) blue"
        ]
        assert again.status == DialogTurnStatus.WAITING

    async def test_message_locale(self, application):
        """Test the request locale reaches the prompt."""
        result = await application.handle_message("conv-es", "hola", locale="es-es")
        assert result.replies[0].text == "favorite color? (1) red, (2) green, o (3) blue"

    async def test_reset_clears_conversations(self, application):
        """Test reset drops conversation state and trace events."""
        await application.handle_message("conv-1", "hello")
        await application.reset()

        assert await application.storage.get_conversation_state("conv-1") is None
        assert await application.storage.get_trace_events() == []

        restarted = await application.handle_message("conv-1", "green")
        assert restarted.replies[0].text.startswith("favorite color?")
