"""JUnit XML rendering for a TestResult."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from staticpod_audit.models.analysis import TestResult


def render_junit(result: TestResult, suite_name: str = "openshift-tests") -> ET.Element:
    """Return a ``<testsuite>`` element holding a single test case."""
    suite = ET.Element(
        "testsuite",
        {
            "name": suite_name,
            "tests": "1",
            "failures": "0" if result.passed else "1",
            "time": f"{result.duration_seconds:.3f}",
        },
    )
    case = ET.SubElement(suite, "testcase", {"name": result.name, "time": f"{result.duration_seconds:.3f}"})
    if not result.passed:
        failure = ET.SubElement(case, "failure", {"message": result.failure_detail.split("\n", 1)[0]})
        failure.text = result.failure_detail
    if result.system_out:
        ET.SubElement(case, "system-out").text = result.system_out
    return suite


def write_junit(result: TestResult, path: str | Path, suite_name: str = "openshift-tests") -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tree = ET.ElementTree(render_junit(result, suite_name))
    ET.indent(tree)
    tree.write(target, encoding="utf-8", xml_declaration=True)
    return target
