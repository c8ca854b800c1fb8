"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from staticpod_audit.models.config import (
    DEFAULT_NAMESPACES,
    DEFAULT_SKIP_REASONS,
    STATIC_POD_TEST_NAME,
    AuditConfig,
    CheckConfig,
    ClusterConfig,
    LogConfig,
    ReportConfig,
)

_RE_DNS1123_LABEL = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"STATICPOD_AUDIT_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env_list(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = _env(key, "")
    if not raw.strip():
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def validate_namespaces(values: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Reject empty lists and names that are not valid namespace names.

    Duplicates are dropped, first occurrence wins.
    """
    seen: list[str] = []
    for ns in values:
        if len(ns) > 63 or not _RE_DNS1123_LABEL.match(ns):
            raise ValueError(f"Invalid namespace name: {ns!r}")
        if ns not in seen:
            seen.append(ns)
    if not seen:
        raise ValueError("At least one namespace must be configured")
    return tuple(seen)


def validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> AuditConfig:
    """Load configuration from STATICPOD_AUDIT_* environment variables."""
    return AuditConfig(
        cluster=ClusterConfig(
            kubeconfig=_env("KUBECONFIG_PATH", ""),
            context=_env("CONTEXT", ""),
        ),
        check=CheckConfig(
            namespaces=validate_namespaces(_env_list("NAMESPACES", DEFAULT_NAMESPACES)),
            skip_reasons=_env_list("SKIP_REASONS", DEFAULT_SKIP_REASONS),
            fallback_enabled=_env_bool("FALLBACK_ENABLED", True),
            test_name=_env("TEST_NAME", STATIC_POD_TEST_NAME),
        ),
        report=ReportConfig(
            junit_path=_env("JUNIT_PATH", ""),
            suite_name=_env("JUNIT_SUITE", "openshift-tests"),
        ),
        log=LogConfig(
            level=validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
