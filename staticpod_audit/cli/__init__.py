"""staticpod-audit command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``staticpod-audit`` script).
"""

from staticpod_audit.cli.main import cli

__all__ = ["cli"]
