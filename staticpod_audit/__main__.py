"""Entry point for `python -m staticpod_audit`.

Usage:
    python -m staticpod_audit check
    uv run python -m staticpod_audit check --junit junit.xml
"""

from __future__ import annotations

from staticpod_audit.cli import cli

cli(prog_name="staticpod-audit")
