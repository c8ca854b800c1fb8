"""Check bootstrap for staticpod-audit.

Wires the pieces in dependency order:
config → logging → K8s client → event sources → correlation engine → report

A client that cannot be built is the only fatal condition. It is reported
as the sole failure of the check rather than raised to the caller.
"""

from __future__ import annotations

import time
from typing import Any

from staticpod_audit.collector.client import ClusterConnectionError, new_client
from staticpod_audit.collector.sources import CoreEventsSource, EventLister, EventsApiSource
from staticpod_audit.correlation.engine import CorrelationEngine
from staticpod_audit.models.analysis import TestResult
from staticpod_audit.models.config import AuditConfig, CheckConfig
from staticpod_audit.observability.logging import get_logger, run_context
from staticpod_audit.report.builder import build_report

_log = get_logger("app")


async def evaluate(
    primary: EventLister,
    secondary: EventLister | None,
    check: CheckConfig,
) -> TestResult:
    """Run the correlation pass over ready-made sources and build the result."""
    t_start = time.monotonic()
    engine = CorrelationEngine(
        primary=primary,
        secondary=secondary,
        namespaces=check.namespaces,
        skip_reasons=check.skip_reasons,
    )
    correlation = await engine.correlate()

    for verdict in correlation.verdicts:
        if verdict.diagnostics:
            _log.info(
                "verdict diagnostics",
                namespace=verdict.fact.namespace,
                node=verdict.fact.node,
                resolved=verdict.resolved,
                diagnostics=verdict.diagnostics,
            )

    result = build_report(
        name=check.test_name,
        verdicts=correlation.verdicts,
        soft_errors=correlation.soft_errors,
        duration_seconds=time.monotonic() - t_start,
    )
    _log.info(
        "static pod check finished",
        passed=result.passed,
        failures=len(correlation.verdicts),
        unresolved=len(correlation.unresolved),
        soft_errors=len(correlation.soft_errors),
    )
    return result


async def run_check(config: AuditConfig) -> TestResult:
    """Connect to the cluster and run the static pod check."""
    with run_context(config.check.test_name):
        return await _run(config)


async def _run(config: AuditConfig) -> TestResult:
    _log.info("static pod check starting", namespaces=list(config.check.namespaces))
    try:
        api_client = await new_client(config.cluster)
    except ClusterConnectionError as exc:
        _log.error("fatal client error", error=str(exc))
        return build_report(name=config.check.test_name, verdicts=[], soft_errors=[], fatal_errors=[str(exc)])

    try:
        primary = EventsApiSource(api_client)
        secondary = CoreEventsSource(api_client) if config.check.fallback_enabled else None
        return await evaluate(primary, secondary, config.check)
    finally:
        await _close_client(api_client)


async def _close_client(api_client: Any) -> None:
    """Close the kubernetes-asyncio ApiClient connection pool."""
    try:
        await api_client.close()
    except Exception as exc:
        _log.debug("k8s client close raised (non-fatal)", error=str(exc))
