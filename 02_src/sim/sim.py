"""SIM implementation - scripted color survey conversations."""

import asyncio
import random
from typing import Protocol

import httpx

from dialogcore.logging_config import get_logger
from dialogcore.tracker import ITracker

logger = get_logger(__name__)

# Each script is played turn by turn against its own conversation.
SCRIPTS = {
    "sim-conv-001": ["hi", "green", "no"],
    "sim-conv-002": ["hello", "purple", "2", "yes", "red", "no"],
    "sim-conv-003": ["hey", "the blue one", "no"],
}


class ISim(Protocol):
    """Generate traffic for the messaging endpoint."""

    async def start(self) -> None:
        """Start the scripted scenario."""
        ...

    async def stop(self) -> None:
        """Stop the scenario."""
        ...


class Sim:
    """Plays scripted conversations through the HTTP API."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        tracker: ITracker | None = None,
        scripts: dict[str, list[str]] | None = None,
        delay_range: tuple[float, float] = (1.0, 3.0),
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url
        self._tracker = tracker
        self._scripts = scripts or SCRIPTS
        self._delay_range = delay_range
        self._transport = transport
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    def set_tracker(self, tracker: ITracker) -> None:
        """Inject tracker for SIM trace events."""
        self._tracker = tracker

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the scripted scenario in the background."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient(transport=self._transport)
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop the scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client:
            await self._client.aclose()
            self._client = None

    async def wait(self) -> None:
        """Wait for the running scenario to finish."""
        if self._task:
            await self._task

    async def _run_scenario(self) -> None:
        summary = {
            "scenario": "color_survey",
            "conversation_count": len(self._scripts),
            "message_count": sum(len(s) for s in self._scripts.values()),
        }
        try:
            if self._tracker:
                await self._tracker.track("sim_started", "sim", summary)

            # Interleave conversations: turn i of every script, then turn i + 1.
            rounds = max((len(s) for s in self._scripts.values()), default=0)
            for i in range(rounds):
                for conversation_id, script in self._scripts.items():
                    if not self._running:
                        return
                    if i < len(script):
                        await self._send_message(conversation_id, script[i])
                        await asyncio.sleep(random.uniform(*self._delay_range))

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            if self._tracker:
                await self._tracker.track("sim_completed", "sim", summary)

    async def _send_message(self, conversation_id: str, text: str) -> None:
        """Send a message via HTTP API."""
        if not self._client:
            return

        try:
            response = await self._client.post(
                f"{self._api_url}/api/messages",
                json={"conversation_id": conversation_id, "text": text},
                timeout=10.0,
            )

            if response.status_code == 200:
                data = response.json()
                logger.info("SIM: %s -> %s", conversation_id, text)
                for reply in data.get("replies", []):
                    logger.info("SIM: Reply: %s", reply.get("text"))
            else:
                logger.error(
                    "SIM: Error sending message: %s",
                    response.status_code,
                )

        except httpx.HTTPError as e:
            logger.error("SIM: Failed to send message: %s", e)
