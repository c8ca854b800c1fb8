"""Event listers for the two Kubernetes event APIs.

The events.k8s.io/v1 API carries the free text in ``note``; the legacy
core/v1 API carries it in ``message``. Both listers normalise into
``EventRecord.message`` so matching logic exists exactly once.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Protocol

from staticpod_audit.models.events import EventRecord, EventSource
from staticpod_audit.observability.logging import get_logger

_log = get_logger("collector.sources")


class TransportError(Exception):
    """Raised when listing events for a namespace fails."""

    def __init__(self, source: EventSource, namespace: str, cause: Exception) -> None:
        super().__init__(f"listing {source} events in namespace {namespace!r} failed: {cause}")
        self.source = source
        self.namespace = namespace
        self.cause = cause


class EventLister(Protocol):
    """Anything that can list the events of one namespace."""

    source: EventSource

    async def list_events(self, namespace: str) -> list[EventRecord]: ...


def _ref_kind_name(ref: Any) -> tuple[str, str]:
    if ref is None:
        return "", ""
    return str(getattr(ref, "kind", "") or ""), str(getattr(ref, "name", "") or "")


def _first(*values: datetime | None) -> datetime | None:
    for value in values:
        if value is not None:
            return value
    return None


class EventsApiSource:
    """Lists events through ``events.k8s.io/v1`` (free text in ``note``)."""

    source = EventSource.EVENTS_API

    def __init__(self, api_client: Any) -> None:
        from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

        self._api = k8s_client.EventsV1Api(api_client)

    async def list_events(self, namespace: str) -> list[EventRecord]:
        try:
            result = await self._api.list_namespaced_event(namespace)
        except Exception as exc:
            raise TransportError(self.source, namespace, exc) from exc
        records = [self._to_record(item, namespace) for item in result.items or []]
        _log.debug("events listed", source=str(self.source), namespace=namespace, count=len(records))
        return records

    def _to_record(self, item: Any, namespace: str) -> EventRecord:
        kind, name = _ref_kind_name(item.regarding)
        series = item.series
        created = item.metadata.creation_timestamp if item.metadata else None
        last_seen = _first(
            series.last_observed_time if series else None,
            item.deprecated_last_timestamp,
            item.event_time,
            created,
        )
        return EventRecord(
            source=self.source,
            reason=item.reason or "",
            message=item.note or "",
            namespace=namespace,
            resource_kind=kind,
            resource_name=name,
            first_seen=_first(item.deprecated_first_timestamp, item.event_time, created),
            last_seen=last_seen,
            count=(series.count if series else None) or item.deprecated_count or 1,
        )


class CoreEventsSource:
    """Lists events through the legacy core ``v1`` API (free text in ``message``)."""

    source = EventSource.CORE_API

    def __init__(self, api_client: Any) -> None:
        from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

        self._api = k8s_client.CoreV1Api(api_client)

    async def list_events(self, namespace: str) -> list[EventRecord]:
        try:
            result = await self._api.list_namespaced_event(namespace)
        except Exception as exc:
            raise TransportError(self.source, namespace, exc) from exc
        records = [self._to_record(item, namespace) for item in result.items or []]
        _log.debug("events listed", source=str(self.source), namespace=namespace, count=len(records))
        return records

    def _to_record(self, item: Any, namespace: str) -> EventRecord:
        kind, name = _ref_kind_name(item.involved_object)
        return EventRecord(
            source=self.source,
            reason=item.reason or "",
            message=item.message or "",
            namespace=namespace,
            resource_kind=kind,
            resource_name=name,
            first_seen=_first(item.first_timestamp, item.event_time),
            last_seen=_first(item.last_timestamp, item.event_time),
            count=item.count or 1,
        )


class StaticEventSource:
    """In-memory lister over already captured events.

    Namespaces listed in *failing* raise ``TransportError`` instead, which
    lets a replay reproduce a partially unreachable API.
    """

    def __init__(
        self,
        records: Mapping[str, Iterable[EventRecord]],
        source: EventSource = EventSource.EVENTS_API,
        failing: Iterable[str] = (),
    ) -> None:
        self.source = source
        self._records = {ns: list(items) for ns, items in records.items()}
        self._failing = set(failing)
        self.calls: list[str] = []

    async def list_events(self, namespace: str) -> list[EventRecord]:
        self.calls.append(namespace)
        if namespace in self._failing:
            raise TransportError(self.source, namespace, ConnectionError("namespace marked unreachable"))
        return list(self._records.get(namespace, []))
