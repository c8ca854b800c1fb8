"""Collapse verdicts and errors into one pass/fail TestResult."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from staticpod_audit.models.analysis import SoftError, TestResult, Verdict


def build_report(
    name: str,
    verdicts: Sequence[Verdict],
    soft_errors: Sequence[SoftError],
    fatal_errors: Iterable[str] = (),
    duration_seconds: float = 0.0,
) -> TestResult:
    """Build the TestResult for one run.

    The run fails only on a fatal error or an unresolved verdict. Lines are
    ordered fatal errors, soft errors, then unresolved failure messages.
    """
    fatal = list(fatal_errors)
    unresolved = [v.fact.raw_message for v in verdicts if not v.resolved]
    output = "\n".join([*fatal, *(e.message for e in soft_errors), *unresolved])

    passed = not fatal and not unresolved
    return TestResult(
        name=name,
        passed=passed,
        failure_detail="" if passed else output,
        system_out=output,
        duration_seconds=duration_seconds,
    )
