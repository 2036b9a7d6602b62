"""JSON encoding of conversation state values.

Dialog stacks are stored inside the conversation blob as plain JSON. Frames
of container dialogs hold their own inner ``DialogState``, and waterfall
frames hold whatever options and values their steps put there, so encoding
walks values recursively and tags the engine's own types for restoration.
"""

from enum import Enum
from typing import Any

from ..models import (
    Activity,
    Choice,
    DialogInstance,
    DialogKind,
    DialogState,
    FoundChoice,
    PromptOptions,
)

TYPE_KEY = "$type"


def encode_value(value: Any) -> Any:
    """Convert a state value into JSON-compatible data."""
    if isinstance(value, DialogState):
        return {
            TYPE_KEY: "DialogState",
            "dialogStack": [encode_value(frame) for frame in value.dialog_stack],
        }
    if isinstance(value, DialogInstance):
        return {
            TYPE_KEY: "DialogInstance",
            "id": value.id,
            "kind": value.kind.value,
            "state": encode_value(value.state),
        }
    if isinstance(value, PromptOptions):
        return {TYPE_KEY: "PromptOptions", **encode_value(value.to_dict())}
    if isinstance(value, Activity):
        return {TYPE_KEY: "Activity", **encode_value(value.to_dict())}
    if isinstance(value, Choice):
        return {
            TYPE_KEY: "Choice",
            "value": value.value,
            "synonyms": list(value.synonyms),
            "title": value.title,
        }
    if isinstance(value, FoundChoice):
        return {
            TYPE_KEY: "FoundChoice",
            "value": value.value,
            "index": value.index,
            "score": value.score,
            "synonym": value.synonym,
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(key): encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    return value


def decode_value(value: Any) -> Any:
    """Restore a value produced by ``encode_value``."""
    if isinstance(value, list):
        return [decode_value(item) for item in value]
    if not isinstance(value, dict):
        return value

    type_name = value.get(TYPE_KEY)
    if type_name == "DialogState":
        return DialogState(
            dialog_stack=[decode_value(frame) for frame in value["dialogStack"]]
        )
    if type_name == "DialogInstance":
        return DialogInstance(
            id=value["id"],
            kind=DialogKind(value.get("kind", DialogKind.CUSTOM.value)),
            state=decode_value(value.get("state") or {}),
        )
    if type_name == "PromptOptions":
        return PromptOptions.from_dict(value)
    if type_name == "Activity":
        return Activity.from_dict(value)
    if type_name == "Choice":
        return Choice(
            value=value["value"],
            synonyms=list(value.get("synonyms") or []),
            title=value.get("title"),
        )
    if type_name == "FoundChoice":
        return FoundChoice(
            value=value["value"],
            index=value["index"],
            score=value["score"],
            synonym=value.get("synonym"),
        )
    return {key: decode_value(item) for key, item in value.items()}
