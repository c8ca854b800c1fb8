"""Static pod failure note extraction.

Operators emit notes such as::

    static pod lifecycle failure - static pod: "etcd" in namespace: "openshift-etcd"
    for revision: 6 on node: "master-2" didn't show up, waited: 2m30s

(on one line). The pod name and wait duration are not used.
"""

from __future__ import annotations

import re

from staticpod_audit.models.analysis import FailureFact

FAILURE_LEAD_IN = "static pod lifecycle failure"

_RE_STATIC_POD_FAILURE = re.compile(
    r'static pod lifecycle failure - static pod: ".*" in namespace: "(.+)" '
    r'for revision: ([0-9]+) on node: "(.+)" didn\'t show up, waited: .*'
)


def is_failure_note(text: str) -> bool:
    """True if *text* claims to be a static pod lifecycle failure."""
    return FAILURE_LEAD_IN in text


def extract_failure(text: str) -> FailureFact | None:
    """Parse *text* into a FailureFact, or return None if it does not fit the template."""
    match = _RE_STATIC_POD_FAILURE.search(text)
    if match is None:
        return None
    namespace, revision, node = match.groups()
    try:
        target_revision = int(revision)
    except ValueError:
        # Beyond the int conversion digit limit; no real revision is that long.
        return None
    return FailureFact(
        namespace=namespace,
        node=node,
        target_revision=target_revision,
        raw_message=text,
    )
