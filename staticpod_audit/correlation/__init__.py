"""Correlation package: extraction, recovery matching and the engine."""

from staticpod_audit.correlation.engine import CorrelationEngine
from staticpod_audit.correlation.extractor import extract_failure, is_failure_note
from staticpod_audit.correlation.fallback import FallbackResult, FallbackVerifier
from staticpod_audit.correlation.matcher import (
    REVISION_CHANGED_REASON,
    find_evidence,
    is_recovery_evidence,
    reached_revision,
)

__all__ = [
    "REVISION_CHANGED_REASON",
    "CorrelationEngine",
    "FallbackResult",
    "FallbackVerifier",
    "extract_failure",
    "find_evidence",
    "is_failure_note",
    "is_recovery_evidence",
    "reached_revision",
]
