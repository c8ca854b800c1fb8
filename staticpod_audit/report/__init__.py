"""Report package: verdicts to a single test result, and JUnit output."""

from staticpod_audit.report.builder import build_report
from staticpod_audit.report.junit import render_junit, write_junit

__all__ = ["build_report", "render_junit", "write_junit"]
