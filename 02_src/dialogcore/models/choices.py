"""Choice-related data models."""

from dataclasses import dataclass, field
from enum import Enum


class ListStyle(str, Enum):
    """How a list of choices is rendered."""

    NONE = "none"
    AUTO = "auto"
    INLINE = "inline"
    LIST = "list"


@dataclass
class Choice:
    """An option offered to the user."""

    value: str
    synonyms: list[str] = field(default_factory=list)
    title: str | None = None

    @property
    def display_title(self) -> str:
        """Text shown when the choice is rendered."""
        return self.title or self.value


@dataclass
class FoundChoice:
    """A choice recognized in an utterance."""

    value: str
    index: int
    score: float
    synonym: str | None = None


@dataclass
class ModelResult:
    """A span of an utterance matched by a recognizer."""

    text: str
    start: int
    end: int
    type_name: str
    resolution: FoundChoice
