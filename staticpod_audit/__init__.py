"""staticpod-audit: post-run verdicts for static pod lifecycle failures."""

__version__ = "0.1.0"
