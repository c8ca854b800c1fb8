"""Second-opinion lookup against the other event API.

The events.k8s.io and core event APIs have been seen to disagree. When the
primary source has no recovery evidence for a fact, the secondary source is
listed and checked with the same rule before the fact is declared
unresolved.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from staticpod_audit.collector.sources import EventLister, TransportError
from staticpod_audit.correlation.matcher import find_evidence
from staticpod_audit.models.analysis import ErrorKind, FailureFact, SoftError
from staticpod_audit.models.events import EventRecord, EventSource
from staticpod_audit.observability.logging import get_logger

_log = get_logger("correlation.fallback")


@dataclass(frozen=True)
class FallbackResult:
    """Outcome of a secondary-source lookup. ``diagnostics`` is advisory only."""

    resolved: bool
    diagnostics: str
    error: SoftError | None = None


class FallbackVerifier:
    """Re-applies the recovery match rule to a secondary event source."""

    def __init__(self, secondary: EventLister, primary_source: EventSource | None = None) -> None:
        self._secondary = secondary
        self._primary_source = primary_source

    @property
    def source(self) -> str:
        return str(self._secondary.source)

    async def verify(self, fact: FailureFact, primary_records: Sequence[EventRecord]) -> FallbackResult:
        _log.info(
            "no recovery evidence in primary source",
            namespace=fact.namespace,
            node=fact.node,
            revision=fact.target_revision,
            failure_message=fact.raw_message,
            primary_events=[r.summary() for r in primary_records],
        )

        try:
            secondary_records = await self._secondary.list_events(fact.namespace)
        except TransportError as exc:
            _log.warning("secondary event source unavailable", namespace=fact.namespace, error=str(exc))
            return FallbackResult(
                resolved=False,
                diagnostics=f"secondary source {self.source} unavailable: {exc}",
                error=SoftError(kind=ErrorKind.TRANSPORT, namespace=fact.namespace, message=str(exc)),
            )

        if not find_evidence(fact, secondary_records):
            return FallbackResult(
                resolved=False,
                diagnostics=(
                    f"no revision {fact.target_revision} evidence for node {fact.node} "
                    f"in either event source ({len(primary_records)} primary, "
                    f"{len(secondary_records)} {self.source} events)"
                ),
            )

        primary_name = str(self._primary_source) if self._primary_source else "the primary source"
        diagnostics = (
            f"event sources disagree: node {fact.node} reaching revision {fact.target_revision} "
            f"in {fact.namespace} was only reported by {self.source}, not {primary_name}"
        )
        _log.warning(
            "event_sources_disagree",
            namespace=fact.namespace,
            node=fact.node,
            revision=fact.target_revision,
            failure_message=fact.raw_message,
            secondary_events=[r.summary() for r in secondary_records],
        )
        return FallbackResult(resolved=True, diagnostics=diagnostics)
