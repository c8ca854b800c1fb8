"""Recovery evidence matching.

A record proves a failure was resolved when the operator later reported
the node reaching exactly the revision that failed to show up.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from staticpod_audit.models.analysis import FailureFact
from staticpod_audit.models.events import EventRecord

REVISION_CHANGED_REASON = "NodeCurrentRevisionChanged"

_RE_REACHED_REVISION = re.compile(r"to ([0-9]+) because static pod is ready")


def reached_revision(text: str) -> int | None:
    """Revision reported by a ``... to N because static pod is ready`` note."""
    match = _RE_REACHED_REVISION.search(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def is_recovery_evidence(fact: FailureFact, record: EventRecord) -> bool:
    """True iff *record* shows ``fact.node`` reaching ``fact.target_revision``.

    Equality is exact: a node that skipped straight past the target revision
    does not count.
    """
    if record.reason != REVISION_CHANGED_REASON:
        return False
    # The node appears only inside the note text, not in a structured field.
    if fact.node not in record.message:
        return False
    return reached_revision(record.message) == fact.target_revision


def find_evidence(fact: FailureFact, records: Iterable[EventRecord]) -> bool:
    """True if any record in *records* is recovery evidence for *fact*."""
    return any(is_recovery_evidence(fact, record) for record in records)
