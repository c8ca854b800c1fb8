"""Integration tests for run_check(): client lifecycle and fatal errors."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import structlog

from staticpod_audit.app import run_check
from staticpod_audit.collector.client import ClusterConnectionError
from staticpod_audit.collector.sources import StaticEventSource
from staticpod_audit.models.config import AuditConfig, CheckConfig
from staticpod_audit.models.events import EventSource

from .conftest import ETCD_NS, make_failure_event, make_recovery_event


def _config(fallback: bool = True) -> AuditConfig:
    return AuditConfig(check=CheckConfig(namespaces=(ETCD_NS,), fallback_enabled=fallback))


class TestRunCheck:
    async def test_connection_error_is_sole_failure(self) -> None:
        err = ClusterConnectionError(RuntimeError("invalid configuration: no configuration has been provided"))
        with (
            patch("staticpod_audit.app.new_client", new=AsyncMock(side_effect=err)),
            patch("staticpod_audit.app.EventsApiSource") as events_source,
        ):
            result = await run_check(_config())

        assert result.passed is False
        assert result.failure_detail == str(err)
        events_source.assert_not_called()

    async def test_pass_closes_client(self) -> None:
        api_client = MagicMock()
        api_client.close = AsyncMock()
        primary = StaticEventSource({ETCD_NS: [make_failure_event(), make_recovery_event()]})
        with (
            patch("staticpod_audit.app.new_client", new=AsyncMock(return_value=api_client)),
            patch("staticpod_audit.app.EventsApiSource", return_value=primary),
            patch("staticpod_audit.app.CoreEventsSource") as core_source,
        ):
            result = await run_check(_config())

        assert result.passed is True
        core_source.assert_called_once_with(api_client)
        api_client.close.assert_awaited_once()

    async def test_secondary_recovery_passes(self) -> None:
        api_client = MagicMock()
        api_client.close = AsyncMock()
        primary = StaticEventSource({ETCD_NS: [make_failure_event()]})
        secondary = StaticEventSource(
            {ETCD_NS: [make_recovery_event(source=EventSource.CORE_API)]},
            source=EventSource.CORE_API,
        )
        with (
            patch("staticpod_audit.app.new_client", new=AsyncMock(return_value=api_client)),
            patch("staticpod_audit.app.EventsApiSource", return_value=primary),
            patch("staticpod_audit.app.CoreEventsSource", return_value=secondary),
        ):
            result = await run_check(_config())

        assert result.passed is True
        assert secondary.calls == [ETCD_NS]

    async def test_fallback_disabled_skips_core_api(self) -> None:
        api_client = MagicMock()
        api_client.close = AsyncMock()
        primary = StaticEventSource({ETCD_NS: [make_failure_event()]})
        with (
            patch("staticpod_audit.app.new_client", new=AsyncMock(return_value=api_client)),
            patch("staticpod_audit.app.EventsApiSource", return_value=primary),
            patch("staticpod_audit.app.CoreEventsSource") as core_source,
        ):
            result = await run_check(_config(fallback=False))

        assert result.passed is False
        core_source.assert_not_called()

    async def test_client_closed_when_engine_raises(self) -> None:
        api_client = MagicMock()
        api_client.close = AsyncMock()
        broken = MagicMock()
        broken.source = EventSource.EVENTS_API
        broken.list_events = AsyncMock(side_effect=KeyError("boom"))
        with (
            patch("staticpod_audit.app.new_client", new=AsyncMock(return_value=api_client)),
            patch("staticpod_audit.app.EventsApiSource", return_value=broken),
            patch("staticpod_audit.app.CoreEventsSource"),
        ):
            with pytest.raises(KeyError):
                await run_check(_config())

        api_client.close.assert_awaited_once()

    async def test_run_id_and_check_bound_while_running(self) -> None:
        seen: dict[str, object] = {}

        async def _capture(_cluster):
            seen.update(structlog.contextvars.get_contextvars())
            raise ClusterConnectionError(RuntimeError("unreachable"))

        with patch("staticpod_audit.app.new_client", new=_capture):
            await run_check(_config())

        assert seen["check"] == CheckConfig().test_name
        assert isinstance(seen["run_id"], str) and len(seen["run_id"]) == 12
        assert "run_id" not in structlog.contextvars.get_contextvars()
