"""Core event data structures and enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class EventSource(StrEnum):
    """API group an event record was listed from."""

    EVENTS_API = "events.k8s.io/v1"
    CORE_API = "v1"


@dataclass(frozen=True)
class EventRecord:
    """Canonical event representation.

    Both event APIs are translated into this shape by the collector.
    ``message`` holds the free text regardless of whether it arrived in the
    ``note`` (events.k8s.io/v1) or ``message`` (core/v1) field.
    """

    source: EventSource
    reason: str
    message: str
    namespace: str
    resource_kind: str = ""
    resource_name: str = ""
    first_seen: datetime | None = None
    last_seen: datetime | None = None
    count: int = 1

    def summary(self) -> dict[str, object]:
        """Compact form used when dumping events to the log."""
        return {
            "reason": self.reason,
            "message": self.message,
            "object": f"{self.resource_kind}/{self.resource_name}",
            "last_seen": self.last_seen.isoformat() if self.last_seen else None,
            "count": self.count,
        }
