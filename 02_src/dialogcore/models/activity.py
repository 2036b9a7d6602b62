"""Turn transport data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActivityTypes(str, Enum):
    """Kinds of activities exchanged during a turn."""

    MESSAGE = "message"
    EVENT = "event"
    CONVERSATION_UPDATE = "conversationUpdate"


class InputHints(str, Enum):
    """Presentation hint telling the channel whether input is expected."""

    ACCEPTING_INPUT = "acceptingInput"
    EXPECTING_INPUT = "expectingInput"
    IGNORING_INPUT = "ignoringInput"


@dataclass
class Activity:
    """A single inbound or outbound activity."""

    type: ActivityTypes = ActivityTypes.MESSAGE
    text: str | None = None
    locale: str | None = None
    input_hint: InputHints | None = None
    conversation_id: str | None = None
    channel_id: str = "test"
    speak: str | None = None
    value: Any = None
    attachments: list[dict] = field(default_factory=list)

    @classmethod
    def message(
        cls,
        text: str | None,
        speak: str | None = None,
        input_hint: InputHints | None = None,
    ) -> "Activity":
        """Build an outbound message activity."""
        return cls(
            type=ActivityTypes.MESSAGE,
            text=text,
            speak=speak,
            input_hint=input_hint,
        )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "type": self.type.value,
            "text": self.text,
            "locale": self.locale,
            "input_hint": self.input_hint.value if self.input_hint else None,
            "conversation_id": self.conversation_id,
            "channel_id": self.channel_id,
            "speak": self.speak,
            "value": self.value,
            "attachments": list(self.attachments),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Activity":
        """Restore an activity serialized with ``to_dict``."""
        hint = data.get("input_hint")
        return cls(
            type=ActivityTypes(data.get("type", ActivityTypes.MESSAGE.value)),
            text=data.get("text"),
            locale=data.get("locale"),
            input_hint=InputHints(hint) if hint else None,
            conversation_id=data.get("conversation_id"),
            channel_id=data.get("channel_id", "test"),
            speak=data.get("speak"),
            value=data.get("value"),
            attachments=list(data.get("attachments") or []),
        )
