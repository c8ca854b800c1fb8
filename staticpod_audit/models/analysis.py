"""Failure facts, verdicts and test results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from staticpod_audit.models.events import EventSource


class ErrorKind(StrEnum):
    """Category of a recoverable problem recorded during a run."""

    TRANSPORT = "transport"
    EXTRACTION = "extraction"


@dataclass(frozen=True)
class FailureFact:
    """One static pod that did not show up at its target revision.

    Built only from a fully matched failure note; the constructor rejects
    anything that would leave the fact half-populated.
    """

    namespace: str
    node: str
    target_revision: int
    raw_message: str

    def __post_init__(self) -> None:
        if not self.namespace:
            raise ValueError("FailureFact.namespace must not be empty")
        if not self.node:
            raise ValueError("FailureFact.node must not be empty")
        if self.target_revision < 0:
            raise ValueError(f"FailureFact.target_revision must be >= 0, got {self.target_revision}")


@dataclass(frozen=True)
class SoftError:
    """A recoverable error. Reported, but never fatal to the run."""

    kind: ErrorKind
    namespace: str
    message: str


@dataclass(frozen=True)
class Verdict:
    """Outcome for a single FailureFact."""

    fact: FailureFact
    resolved: bool
    evidence_source: EventSource | None = None
    diagnostics: str = ""


@dataclass
class CorrelationResult:
    """Everything a correlation run produced, in discovery order."""

    verdicts: list[Verdict] = field(default_factory=list)
    soft_errors: list[SoftError] = field(default_factory=list)

    @property
    def unresolved(self) -> list[Verdict]:
        return [v for v in self.verdicts if not v.resolved]

    @property
    def resolved(self) -> list[Verdict]:
        return [v for v in self.verdicts if v.resolved]


@dataclass
class TestResult:
    """Single pass/fail outcome of the static pod check.

    Mirrors a JUnit test case: ``failure_detail`` is empty on a pass, and
    ``system_out`` keeps whatever was reported (soft errors included).
    """

    __test__ = False  # not a pytest test class

    name: str
    passed: bool
    failure_detail: str = ""
    system_out: str = ""
    duration_seconds: float = 0.0
