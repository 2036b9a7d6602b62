"""Scripted conversation tests."""

from typing import Callable, Union

from ..models import Activity
from .adapter import BotLogic, TestAdapter

ReplyInspector = Callable[[Activity], None]
Expected = Union[str, Activity, ReplyInspector]


class TestFlow:
    """Builds a scripted exchange and runs it with ``start_test()``.

    Example::

        await (
            TestFlow(adapter, bot.on_turn)
            .send("hello")
            .assert_reply("favorite color? (1) red, (2) green, or (3) blue")
            .start_test()
        )
    """

    __test__ = False  # not a pytest test class

    def __init__(self, adapter: TestAdapter, logic: BotLogic | None = None):
        self._adapter = adapter
        self._logic = logic
        self._steps: list[Callable] = []

    def send(self, user_says: str | Activity) -> "TestFlow":
        async def step() -> None:
            activity = (
                self._adapter.make_activity(user_says)
                if isinstance(user_says, str)
                else user_says
            )
            await self._adapter.process_activity(activity, self._logic)

        self._steps.append(step)
        return self

    def assert_reply(self, expected: Expected, description: str | None = None) -> "TestFlow":
        async def step() -> None:
            reply = self._adapter.get_next_reply()
            label = description or f"reply {expected!r}"
            if reply is None:
                raise AssertionError(f"{label}: no reply received")

            if isinstance(expected, str):
                if reply.text != expected:
                    raise AssertionError(
                        f"{label}: expected {expected!r}, got {reply.text!r}"
                    )
            elif isinstance(expected, Activity):
                if (reply.type, reply.text) != (expected.type, expected.text):
                    raise AssertionError(
                        f"{label}: expected {expected.text!r}, got {reply.text!r}"
                    )
            else:
                expected(reply)

        self._steps.append(step)
        return self

    def assert_no_reply(self, description: str | None = None) -> "TestFlow":
        async def step() -> None:
            reply = self._adapter.get_next_reply()
            if reply is not None:
                raise AssertionError(
                    f"{description or 'no reply'}: unexpected reply {reply.text!r}"
                )

        self._steps.append(step)
        return self

    def test(self, user_says: str | Activity, expected: Expected) -> "TestFlow":
        return self.send(user_says).assert_reply(expected)

    async def start_test(self) -> None:
        for step in self._steps:
            await step()
