"""Core data structures for staticpod-audit."""

from staticpod_audit.models.analysis import (
    CorrelationResult,
    ErrorKind,
    FailureFact,
    SoftError,
    TestResult,
    Verdict,
)
from staticpod_audit.models.config import AuditConfig
from staticpod_audit.models.events import EventRecord, EventSource

__all__ = [
    "AuditConfig",
    "CorrelationResult",
    "ErrorKind",
    "EventRecord",
    "EventSource",
    "FailureFact",
    "SoftError",
    "TestResult",
    "Verdict",
]
