"""Tracing and observability data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TraceEvent:
    """A single observability event recorded while processing turns."""

    id: str
    event_type: str  # e.g. "turn_processed", "dialog_version_changed"
    actor: str  # component that recorded the event
    data: dict
    timestamp: datetime
