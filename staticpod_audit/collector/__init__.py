"""Collector package for staticpod-audit.

Lists Kubernetes events for a namespace and translates them into
``EventRecord`` values the correlation engine consumes.

Submodules
----------
client  -- new_client(): ApiClient from kubeconfig or in-cluster service account.
sources -- EventsApiSource / CoreEventsSource / StaticEventSource listers.
"""

from staticpod_audit.collector.client import ClusterConnectionError, new_client
from staticpod_audit.collector.sources import (
    CoreEventsSource,
    EventLister,
    EventsApiSource,
    StaticEventSource,
    TransportError,
)

__all__ = [
    "ClusterConnectionError",
    "CoreEventsSource",
    "EventLister",
    "EventsApiSource",
    "StaticEventSource",
    "TransportError",
    "new_client",
]
