"""Tests for DialogSet."""

import pytest

from dialogcore.dialogs import DialogSet, WaterfallDialog
from dialogcore.errors import DuplicateIdError, InvalidArgumentError

from helpers import EchoDialog


class TestDialogSetConstruction:
    """Tests for DialogSet construction."""

    def test_none_state_property_raises(self):
        """Test a null state accessor is rejected."""
        with pytest.raises(InvalidArgumentError):
            DialogSet(None)

    def test_accepts_state_property(self, conversation_state):
        """Test a set bound to a state accessor."""
        dialogs = DialogSet(conversation_state.create_property("DialogState"))
        assert len(dialogs) == 0


class TestDialogSetRegistration:
    """Tests for add/find."""

    def test_add_and_find(self, conversation_state):
        """Test a registered dialog is found by id."""
        dialogs = DialogSet(conversation_state.create_property("DialogState"))
        echo = EchoDialog("echo")

        assert dialogs.add(echo) is dialogs
        assert dialogs.find("echo") is echo
        assert "echo" in dialogs

    def test_find_unknown_returns_none(self, conversation_state):
        """Test unknown ids are not found."""
        dialogs = DialogSet(conversation_state.create_property("DialogState"))
        assert dialogs.find("nope") is None
        assert dialogs.find("") is None

    def test_duplicate_id_raises(self, conversation_state):
        """Test registering an id twice fails."""
        dialogs = DialogSet(conversation_state.create_property("DialogState"))
        dialogs.add(EchoDialog("echo"))

        with pytest.raises(DuplicateIdError) as exc_info:
            dialogs.add(EchoDialog("echo"))
        assert exc_info.value.dialog_id == "echo"

    def test_add_none_raises(self, conversation_state):
        """Test a null dialog is rejected."""
        dialogs = DialogSet(conversation_state.create_property("DialogState"))
        with pytest.raises(InvalidArgumentError):
            dialogs.add(None)

    def test_empty_dialog_id_raises(self):
        """Test dialogs need an id."""
        with pytest.raises(InvalidArgumentError):
            EchoDialog("")


class TestDialogSetContext:
    """Tests for create_context()."""

    async def test_create_context_uses_persisted_stack(
        self, conversation_state, make_turn_context
    ):
        """Test the context is bound to the conversation's DialogState."""
        accessor = conversation_state.create_property("DialogState")
        dialogs = DialogSet(accessor)
        tc = make_turn_context()

        dc = await dialogs.create_context(tc)

        assert dc.stack == []
        assert dc.stack is (await accessor.get(tc)).dialog_stack

    async def test_create_context_requires_turn_context(self, conversation_state):
        """Test a null turn context is rejected."""
        dialogs = DialogSet(conversation_state.create_property("DialogState"))
        with pytest.raises(InvalidArgumentError):
            await dialogs.create_context(None)

    async def test_container_owned_set_has_no_context(self, make_turn_context):
        """Test sets owned by containers cannot create root contexts."""
        dialogs = DialogSet.for_container()
        with pytest.raises(InvalidArgumentError):
            await dialogs.create_context(make_turn_context())


class TestDialogSetVersion:
    """Tests for the set signature."""

    def test_signature_lists_child_versions(self):
        """Test the signature is made of child versions."""
        dialogs = DialogSet.for_container()
        dialogs.add(WaterfallDialog("b", [lambda s: None]))
        dialogs.add(EchoDialog("a"))

        assert dialogs.get_signature() == ["a", "b:1"]

    def test_version_ignores_registration_order(self):
        """Test the same dialogs in a different order give the same version."""
        first = DialogSet.for_container().add(EchoDialog("a")).add(EchoDialog("b"))
        second = DialogSet.for_container().add(EchoDialog("b")).add(EchoDialog("a"))

        assert first.get_version() == second.get_version()
