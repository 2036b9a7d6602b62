"""End-to-end tests for WaterfallDialog."""

import pytest

from dialogcore.dialogs import ComponentDialog, Dialog, DialogManager, WaterfallDialog
from dialogcore.errors import DialogError
from dialogcore.models import DialogTurnStatus, PromptOptions
from dialogcore.testing import TestFlow


def make_manager(conversation_state, *steps):
    return DialogManager(WaterfallDialog("waterfall", list(steps)), conversation_state)


class TestWaterfallSequencing:
    """Tests for one-step-per-turn sequencing."""

    async def test_three_steps_one_reply_per_turn(self, adapter, conversation_state):
        """Test each turn runs exactly one step, in order, then the dialog ends."""

        async def step1(step):
            await step.send("step1")
            return Dialog.END_OF_TURN

        async def step2(step):
            await step.send("step2")
            return Dialog.END_OF_TURN

        async def step3(step):
            await step.send("step3")
            return Dialog.END_OF_TURN

        manager = make_manager(conversation_state, step1, step2, step3)
        results = []

        async def logic(tc):
            results.append(await manager.on_turn(tc))

        await (
            TestFlow(adapter, logic)
            .send("hello")
            .assert_reply("step1")
            .assert_no_reply()
            .send("hello")
            .assert_reply("step2")
            .assert_no_reply()
            .send("hello")
            .assert_reply("step3")
            .assert_no_reply()
            .send("hello")
            .assert_no_reply()
            .start_test()
        )

        assert [r.status for r in results] == [
            DialogTurnStatus.WAITING,
            DialogTurnStatus.WAITING,
            DialogTurnStatus.WAITING,
            DialogTurnStatus.COMPLETE,
        ]

    async def test_step_result_is_previous_input(self, adapter, conversation_state):
        """Test a step sees the user's reply to the previous step."""

        async def ask(step):
            await step.send("name?")

        async def greet(step):
            await step.send(f"hello {step.result}")
            return await step.end_dialog(step.result)

        manager = make_manager(conversation_state, ask, greet)

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "name?")
            .test("Ada", "hello Ada")
            .start_test()
        )

    async def test_values_persist_across_turns(self, adapter, conversation_state):
        """Test step values survive between turns."""

        async def remember(step):
            step.values["first"] = step.context.activity.text
            await step.send("again?")

        async def recall(step):
            await step.send(f"{step.values['first']} then {step.result}")
            return await step.end_dialog()

        manager = make_manager(conversation_state, remember, recall)

        await (
            TestFlow(adapter, manager.on_turn)
            .test("one", "again?")
            .test("two", "one then two")
            .start_test()
        )


    async def test_prompt_options_survive_turns(self, adapter, conversation_state):
        """Test a waterfall begun with PromptOptions reads them back next turn."""

        async def start(step):
            return await step.begin_dialog("inner", PromptOptions(prompt="question"))

        async def ask(step):
            await step.send(step.options.prompt.text)

        async def answer(step):
            await step.send(f"{step.options.prompt.text}: {step.result}")
            return await step.end_dialog()

        root = ComponentDialog("root")
        root.add_dialog(WaterfallDialog("outer", [start]))
        root.add_dialog(WaterfallDialog("inner", [ask, answer]))
        manager = DialogManager(root, conversation_state)

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "question")
            .test("42", "question: 42")
            .start_test()
        )

class TestWaterfallNext:
    """Tests for WaterfallStepContext.next()."""

    async def test_next_skips_to_following_step(self, adapter, conversation_state):
        """Test next() runs the following step in the same turn."""

        async def first(step):
            await step.send("first")
            return await step.next("carried")

        async def second(step):
            await step.send(f"second got {step.result}")

        manager = make_manager(conversation_state, first, second)

        await (
            TestFlow(adapter, manager.on_turn)
            .send("go")
            .assert_reply("first")
            .assert_reply("second got carried")
            .start_test()
        )

    async def test_next_twice_raises(self, adapter, conversation_state):
        """Test calling next() twice from one step fails."""

        async def first(step):
            await step.next()
            return await step.next()

        async def second(step):
            await step.send("second")

        manager = make_manager(conversation_state, first, second)

        with pytest.raises(DialogError, match="already called"):
            await TestFlow(adapter, manager.on_turn).send("go").start_test()

    async def test_replace_restarts_waterfall(self, adapter, conversation_state):
        """Test replace_dialog() from a step starts the waterfall over."""

        async def ask(step):
            await step.send("say yes")

        async def check(step):
            if step.result != "yes":
                return await step.replace_dialog("waterfall")
            await step.send("thanks")
            return await step.end_dialog()

        manager = make_manager(conversation_state, ask, check)

        await (
            TestFlow(adapter, manager.on_turn)
            .test("hi", "say yes")
            .test("no", "say yes")
            .test("yes", "thanks")
            .start_test()
        )


class TestWaterfallVersion:
    """Tests for the waterfall signature."""

    def test_version_includes_step_count(self):
        """Test adding a step changes the version."""
        waterfall = WaterfallDialog("w", [lambda s: None])
        before = waterfall.get_version()
        waterfall.add_step(lambda s: None)

        assert before == "w:1"
        assert waterfall.get_version() == "w:2"
