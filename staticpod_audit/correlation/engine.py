"""Correlation engine: failure notes in, one verdict per failure out.

Phase 1 scans every configured namespace for static pod failure notes.
Phase 2 re-lists each failure's namespace and looks for proof that the node
eventually reached the revision, asking the secondary source when the
primary one has none.
"""

from __future__ import annotations

from collections.abc import Iterable

from staticpod_audit.collector.sources import EventLister, TransportError
from staticpod_audit.correlation.extractor import extract_failure, is_failure_note
from staticpod_audit.correlation.fallback import FallbackVerifier
from staticpod_audit.correlation.matcher import find_evidence
from staticpod_audit.models.analysis import (
    CorrelationResult,
    ErrorKind,
    FailureFact,
    SoftError,
    Verdict,
)
from staticpod_audit.models.config import DEFAULT_NAMESPACES, DEFAULT_SKIP_REASONS
from staticpod_audit.models.events import EventRecord
from staticpod_audit.observability.logging import get_logger

_log = get_logger("correlation.engine")


class CorrelationEngine:
    """Runs one sequential correlation pass over the configured namespaces.

    Args:
        primary:      Source scanned for failures and checked first for evidence.
        secondary:    Optional source consulted when the primary has no evidence.
        namespaces:   Namespaces to scan, in order.
        skip_reasons: Event reasons dropped before extraction.
    """

    def __init__(
        self,
        primary: EventLister,
        secondary: EventLister | None = None,
        namespaces: Iterable[str] = DEFAULT_NAMESPACES,
        skip_reasons: Iterable[str] = DEFAULT_SKIP_REASONS,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._fallback = FallbackVerifier(secondary, primary_source=primary.source) if secondary is not None else None
        self._namespaces = tuple(namespaces)
        self._skip_reasons = frozenset(skip_reasons)

    async def correlate(self) -> CorrelationResult:
        result = CorrelationResult()

        facts = await self._collect_failures(result.soft_errors)
        _log.info("static pod failures collected", failures=len(facts), namespaces=len(self._namespaces))

        for fact in facts:
            result.verdicts.append(await self._judge(fact, result.soft_errors))

        _log.info(
            "correlation finished",
            verdicts=len(result.verdicts),
            unresolved=len(result.unresolved),
            soft_errors=len(result.soft_errors),
        )
        return result

    async def _collect_failures(self, errors: list[SoftError]) -> list[FailureFact]:
        facts: list[FailureFact] = []
        for namespace in self._namespaces:
            try:
                records = await self._primary.list_events(namespace)
            except TransportError as exc:
                _log.warning("event listing failed", namespace=namespace, error=str(exc))
                errors.append(SoftError(kind=ErrorKind.TRANSPORT, namespace=namespace, message=str(exc)))
                continue

            for record in records:
                if record.reason in self._skip_reasons or not is_failure_note(record.message):
                    continue
                fact = extract_failure(record.message)
                if fact is None:
                    _log.warning("unrecognised failure note", namespace=namespace, message=record.message)
                    errors.append(
                        SoftError(
                            kind=ErrorKind.EXTRACTION,
                            namespace=namespace,
                            message=f"unrecognised static pod failure message: {record.message}",
                        )
                    )
                    continue
                facts.append(fact)
        return facts

    async def _judge(self, fact: FailureFact, errors: list[SoftError]) -> Verdict:
        # Listed again on purpose: recovery events may have arrived since phase 1.
        records: list[EventRecord] = []
        try:
            records = await self._primary.list_events(fact.namespace)
        except TransportError as exc:
            _log.warning("event listing failed", namespace=fact.namespace, error=str(exc))
            errors.append(SoftError(kind=ErrorKind.TRANSPORT, namespace=fact.namespace, message=str(exc)))

        if find_evidence(fact, records):
            _log.debug("failure resolved", namespace=fact.namespace, node=fact.node, revision=fact.target_revision)
            return Verdict(fact=fact, resolved=True, evidence_source=self._primary.source)

        if self._fallback is None:
            return Verdict(fact=fact, resolved=False)

        outcome = await self._fallback.verify(fact, records)
        if outcome.error is not None:
            errors.append(outcome.error)
        if outcome.resolved:
            _log.info("failure recovered", namespace=fact.namespace, node=fact.node, revision=fact.target_revision)
        return Verdict(
            fact=fact,
            resolved=outcome.resolved,
            evidence_source=self._secondary.source if self._secondary and outcome.resolved else None,
            diagnostics=outcome.diagnostics,
        )

