"""Application bootstrap and lifecycle management."""

import os
from dataclasses import dataclass, field
from typing import Protocol

from .bots import ColorSurveyDialog
from .config import resolve_db_path, resolve_default_locale
from .dialogs import Dialog, DialogManager
from .logging_config import get_logger
from .models import Activity, ActivityTypes, DialogTurnStatus
from .state import ConversationState
from .storage import IStorage, Storage
from .tracker import ITracker, Tracker
from .turn import BufferedAdapter, TurnContext

logger = get_logger(__name__)


@dataclass
class MessageResult:
    """Outcome of one message turn."""

    status: DialogTurnStatus
    replies: list[Activity] = field(default_factory=list)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Reset data between test runs."""
        ...

    async def handle_message(
        self, conversation_id: str, text: str, locale: str | None = None
    ) -> MessageResult:
        """Run one turn of a conversation."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        db_path: str | None = None,
        root_dialog: Dialog | None = None,
        default_locale: str | None = None,
    ):
        env_db_path = os.getenv("DATABASE_URL") if db_path is None else db_path
        self._db_path = resolve_db_path(env_db_path)
        self._default_locale = resolve_default_locale(default_locale)
        self._root_dialog = root_dialog

        # Components (will be initialized in start())
        self._storage: IStorage | None = None
        self._tracker: ITracker | None = None
        self._conversation_state: ConversationState | None = None
        self._dialog_manager: DialogManager | None = None
        self._adapter = BufferedAdapter()

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Storage (no dependencies)
        self._storage = Storage(self._db_path)
        await self._storage.init()
        logger.info("Storage initialized")

        # 2. Tracker (depends on Storage)
        self._tracker = Tracker(self._storage)

        # 3. ConversationState (depends on Storage)
        self._conversation_state = ConversationState(self._storage)

        # 4. DialogManager (depends on ConversationState + Tracker)
        root_dialog = self._root_dialog or ColorSurveyDialog(
            default_locale=self._default_locale
        )
        self._dialog_manager = DialogManager(
            root_dialog, self._conversation_state, self._tracker
        )
        logger.info(
            "DialogManager ready with root dialog %s (version %s)",
            root_dialog.id,
            root_dialog.get_version(),
        )

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._dialog_manager = None
        self._conversation_state = None
        self._tracker = None
        if self._storage:
            await self._storage.close()
            self._storage = None
            logger.info("Storage closed")

    async def reset(self) -> None:
        """Drop all conversations and trace events."""
        if self._storage:
            await self._storage.clear()
            logger.info("Storage cleared")

    async def handle_message(
        self, conversation_id: str, text: str, locale: str | None = None
    ) -> MessageResult:
        """Run one message turn and return the replies it produced."""
        activity = Activity(
            type=ActivityTypes.MESSAGE,
            text=text,
            locale=locale or self._default_locale,
            conversation_id=conversation_id,
            channel_id="api",
        )
        turn_context = TurnContext(self._adapter, activity)
        result = await self.dialog_manager.on_turn(turn_context)
        return MessageResult(
            status=result.status,
            replies=BufferedAdapter.replies(turn_context),
        )

    @property
    def storage(self) -> IStorage:
        """Get storage instance."""
        if not self._storage:
            raise RuntimeError("Application not started")
        return self._storage

    @property
    def tracker(self) -> ITracker:
        """Get tracker instance."""
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker

    @property
    def dialog_manager(self) -> DialogManager:
        """Get dialog manager instance."""
        if not self._dialog_manager:
            raise RuntimeError("Application not started")
        return self._dialog_manager
