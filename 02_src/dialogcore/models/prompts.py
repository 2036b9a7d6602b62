"""Prompt-related data models."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .activity import Activity
from .choices import Choice, ListStyle

T = TypeVar("T")


@dataclass
class PromptOptions:
    """Options passed to a prompt when it begins."""

    prompt: Activity | None = None
    retry_prompt: Activity | None = None
    choices: list[Choice] = field(default_factory=list)
    style: ListStyle | None = None
    validations: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.prompt, str):
            self.prompt = Activity.message(self.prompt)
        if isinstance(self.retry_prompt, str):
            self.retry_prompt = Activity.message(self.retry_prompt)
        self.choices = [
            Choice(value=c) if isinstance(c, str) else c for c in self.choices
        ]

    def to_dict(self) -> dict:
        """Serialize for storage in a stack frame."""
        return {
            "prompt": self.prompt.to_dict() if self.prompt else None,
            "retry_prompt": (
                self.retry_prompt.to_dict() if self.retry_prompt else None
            ),
            "choices": [
                {"value": c.value, "synonyms": list(c.synonyms), "title": c.title}
                for c in self.choices
            ],
            "style": self.style.value if self.style else None,
            "validations": self.validations,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PromptOptions":
        """Restore options persisted with ``to_dict``."""
        return cls(
            prompt=Activity.from_dict(data["prompt"]) if data.get("prompt") else None,
            retry_prompt=(
                Activity.from_dict(data["retry_prompt"])
                if data.get("retry_prompt")
                else None
            ),
            choices=[
                Choice(
                    value=c["value"],
                    synonyms=list(c.get("synonyms") or []),
                    title=c.get("title"),
                )
                for c in data.get("choices") or []
            ],
            style=ListStyle(data["style"]) if data.get("style") else None,
            validations=data.get("validations"),
        )


@dataclass
class PromptRecognizerResult(Generic[T]):
    """Outcome of a recognition attempt."""

    succeeded: bool = False
    value: T | None = None
