"""Shared fixtures for staticpod-audit integration tests.

Provides event factories and in-memory event sources so the full
correlation pipeline runs without touching a real cluster.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from staticpod_audit.collector.sources import StaticEventSource
from staticpod_audit.correlation.matcher import REVISION_CHANGED_REASON
from staticpod_audit.models.config import CheckConfig
from staticpod_audit.models.events import EventRecord, EventSource

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

_NOW = datetime.now(UTC)
_5_MIN_AGO = _NOW - timedelta(minutes=5)

ETCD_NS = "openshift-etcd-operator"
APISERVER_NS = "openshift-kube-apiserver-operator"

ETCD_FAILURE_NOTE = (
    'static pod lifecycle failure - static pod: "etcd" in namespace: "openshift-etcd-operator" '
    'for revision: 6 on node: "node-1" didn\'t show up, waited: 2m30s'
)


# ---------------------------------------------------------------------------
# Event factory helpers
# ---------------------------------------------------------------------------


def make_event(
    reason: str = "Normal",
    message: str = "",
    namespace: str = ETCD_NS,
    source: EventSource = EventSource.EVENTS_API,
    resource_kind: str = "Deployment",
    resource_name: str = "etcd-operator",
    last_seen: datetime | None = None,
) -> EventRecord:
    """Create an EventRecord with sensible defaults for testing."""
    return EventRecord(
        source=source,
        reason=reason,
        message=message,
        namespace=namespace,
        resource_kind=resource_kind,
        resource_name=resource_name,
        first_seen=_5_MIN_AGO,
        last_seen=last_seen or _NOW,
    )


def make_failure_event(
    namespace: str = ETCD_NS,
    node: str = "node-1",
    revision: int = 6,
    pod: str = "etcd",
    reason: str = "StaticPodInstallerFailed",
    **kwargs,
) -> EventRecord:
    """Create a static pod lifecycle failure event."""
    note = (
        f'static pod lifecycle failure - static pod: "{pod}" in namespace: "{namespace}" '
        f'for revision: {revision} on node: "{node}" didn\'t show up, waited: 2m30s'
    )
    return make_event(reason=reason, message=note, namespace=namespace, **kwargs)


def make_recovery_event(
    namespace: str = ETCD_NS,
    node: str = "node-1",
    revision: int = 6,
    **kwargs,
) -> EventRecord:
    """Create a NodeCurrentRevisionChanged event reporting *node* at *revision*."""
    message = f'Updated node "{node}" from revision {revision - 1} to {revision} because static pod is ready'
    return make_event(reason=REVISION_CHANGED_REASON, message=message, namespace=namespace, **kwargs)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def check_config() -> CheckConfig:
    """Default check configuration with two namespaces to keep tests small."""
    return CheckConfig(namespaces=(ETCD_NS, APISERVER_NS))


@pytest.fixture
def empty_core_source() -> StaticEventSource:
    return StaticEventSource({}, source=EventSource.CORE_API)
