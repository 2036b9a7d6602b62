"""Tests for the Prompt state machine and the simple prompts."""

import pytest

from dialogcore.dialogs import ComponentDialog, DialogManager, WaterfallDialog
from dialogcore.errors import InvalidArgumentError
from dialogcore.models import Activity, ActivityTypes, InputHints, PromptOptions
from dialogcore.prompts import ConfirmPrompt, NumberPrompt, TextPrompt, parse_number
from dialogcore.testing import TestFlow


def make_prompt_bot(conversation_state, prompt, options):
    """Root component that asks with ``prompt`` and echoes the answer."""

    async def ask(step):
        return await step.prompt(prompt.id, options)

    async def show(step):
        await step.send(f"You said {step.result}")
        return await step.end_dialog(step.result)

    root = ComponentDialog("root")
    root.add_dialog(WaterfallDialog("steps", [ask, show]))
    root.add_dialog(prompt)
    return DialogManager(root, conversation_state)


class TestPromptArguments:
    """Tests for argument validation."""

    async def test_begin_without_prompt_options_raises(
        self, conversation_state, adapter
    ):
        """Test a prompt cannot begin with options of another shape."""

        async def ask(step):
            return await step.begin_dialog("text", {"prompt": "name?"})

        root = ComponentDialog("root")
        root.add_dialog(WaterfallDialog("steps", [ask]))
        root.add_dialog(TextPrompt("text"))
        manager = DialogManager(root, conversation_state)

        with pytest.raises(InvalidArgumentError, match="Prompt options"):
            await TestFlow(adapter, manager.on_turn).send("hi").start_test()

    async def test_on_prompt_requires_turn_context(self):
        """Test rendering without a turn context fails."""
        prompt = TextPrompt("text")
        with pytest.raises(InvalidArgumentError):
            await prompt.on_prompt(None, {}, PromptOptions(prompt="name?"), False)

    async def test_on_recognize_requires_turn_context(self):
        """Test recognizing without a turn context fails."""
        prompt = NumberPrompt("number")
        with pytest.raises(InvalidArgumentError):
            await prompt.on_recognize(None, {}, PromptOptions())

    async def test_on_recognize_requires_options(self, make_turn_context):
        """Test recognizing without options fails."""
        prompt = ConfirmPrompt("confirm")
        with pytest.raises(InvalidArgumentError):
            await prompt.on_recognize(make_turn_context(), {}, None)


class TestTextPrompt:
    """Tests for TextPrompt."""

    async def test_prompt_and_answer(self, conversation_state, adapter):
        """Test the prompt is sent and the answer returned."""
        manager = make_prompt_bot(
            conversation_state, TextPrompt("text"), PromptOptions(prompt="name?")
        )

        def expects_input(reply):
            assert reply.text == "name?"
            assert reply.input_hint == InputHints.EXPECTING_INPUT

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", expects_input)
            .test("Ada", "You said Ada")
            .start_test()
        )

    async def test_caller_options_are_not_modified(self, conversation_state, adapter):
        """Test the input hint is applied without touching the caller's activities."""
        options = PromptOptions(prompt="name?", retry_prompt="name, please?")
        manager = make_prompt_bot(conversation_state, TextPrompt("text"), options)

        await TestFlow(adapter, manager.on_turn).test("hi", "name?").start_test()

        assert options.prompt.input_hint is None
        assert options.retry_prompt.input_hint is None

    async def test_non_message_activity_is_ignored(self, conversation_state, adapter):
        """Test events do not answer a waiting prompt."""
        manager = make_prompt_bot(
            conversation_state, TextPrompt("text"), PromptOptions(prompt="name?")
        )
        event = Activity(type=ActivityTypes.EVENT, value={"ping": True})

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "name?")
            .send(event)
            .assert_no_reply()
            .test("Ada", "You said Ada")
            .start_test()
        )


class TestNumberPrompt:
    """Tests for NumberPrompt."""

    async def test_retry_until_recognized(self, conversation_state, adapter):
        """Test unrecognized input is answered with the retry prompt."""
        manager = make_prompt_bot(
            conversation_state,
            NumberPrompt("number"),
            PromptOptions(prompt="Enter a number.", retry_prompt="Please enter a number."),
        )

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "Enter a number.")
            .test("abc", "Please enter a number.")
            .test("it is 42", "You said 42")
            .start_test()
        )

    async def test_retry_without_retry_prompt_repeats_prompt(
        self, conversation_state, adapter
    ):
        """Test the original prompt is repeated when no retry prompt is set."""
        manager = make_prompt_bot(
            conversation_state,
            NumberPrompt("number"),
            PromptOptions(prompt="Enter a number."),
        )

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "Enter a number.")
            .test("abc", "Enter a number.")
            .start_test()
        )

    async def test_validator_controls_acceptance(self, conversation_state, adapter):
        """Test a validator can reject recognized values and reply itself."""
        attempts = []

        async def at_least_ten(prompt_context):
            attempts.append(prompt_context.attempt_count)
            if not prompt_context.recognized.succeeded:
                return False
            if prompt_context.recognized.value < 10:
                await prompt_context.context.send_activity("Too small")
                return False
            return True

        manager = make_prompt_bot(
            conversation_state,
            NumberPrompt("number", validator=at_least_ten),
            PromptOptions(prompt="Enter a number.", retry_prompt="Try again."),
        )

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "Enter a number.")
            .test("3", "Too small")
            .assert_no_reply()
            .test("abc", "Try again.")
            .test("12", "You said 12")
            .start_test()
        )

        assert attempts == [1, 2, 3]


class TestParseNumber:
    """Tests for parse_number()."""

    def test_parses_integers_and_decimals(self):
        """Test typical inputs."""
        assert parse_number("42") == 42
        assert parse_number("about -3 or so") == -3
        assert parse_number("1,200.5") == 1200.5

    def test_no_number(self):
        """Test text without a number."""
        assert parse_number("none") is None
        assert parse_number(None) is None


class TestConfirmPrompt:
    """Tests for ConfirmPrompt."""

    @pytest.mark.parametrize(
        "answer, expected",
        [("yes", "You said True"), ("nope", "You said False"), ("1", "You said True")],
    )
    async def test_confirm(self, conversation_state, adapter, answer, expected):
        """Test yes/no recognition by word, synonym and number."""
        manager = make_prompt_bot(
            conversation_state,
            ConfirmPrompt("confirm"),
            PromptOptions(prompt="Continue?"),
        )

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "Continue? (1) Yes or (2) No")
            .test(answer, expected)
            .start_test()
        )

    async def test_localized_yes_no(self, conversation_state):
        """Test the yes/no words follow the activity locale."""
        from dialogcore.testing import TestAdapter

        manager = make_prompt_bot(
            conversation_state,
            ConfirmPrompt("confirm"),
            PromptOptions(prompt="Continuer ?"),
        )

        await (
            TestFlow(TestAdapter(locale="fr-fr"), manager.on_turn)
            .test("salut", "Continuer ? (1) Oui ou (2) Non")
            .test("oui", "You said True")
            .start_test()
        )
