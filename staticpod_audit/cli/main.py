"""
Check command - decide whether static pod lifecycle failures self-healed.

Usage:
    staticpod-audit check
    staticpod-audit check --namespace openshift-etcd-operator --junit ./junit/static-pods.xml
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
from pathlib import Path

import click

from staticpod_audit import __version__
from staticpod_audit.app import run_check
from staticpod_audit.config import load_config, validate_log_level, validate_namespaces
from staticpod_audit.observability.logging import get_logger, setup_logging
from staticpod_audit.report.junit import write_junit


@click.group()
@click.version_option(__version__, prog_name="staticpod-audit")
def cli() -> None:
    """Post-run analysis of static pod lifecycle failures."""


@cli.command("check")
@click.option(
    "--namespace",
    "-n",
    "namespaces",
    multiple=True,
    help="Operator namespace to scan. Repeat for several; replaces the default list.",
)
@click.option(
    "--kubeconfig",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a kubeconfig file. Defaults to in-cluster config, then ~/.kube/config.",
)
@click.option("--context", default=None, help="Kubeconfig context to use.")
@click.option(
    "--fallback/--no-fallback",
    default=None,
    help="Consult the core/v1 events API when events.k8s.io has no recovery evidence.",
)
@click.option(
    "--junit",
    "junit_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the result as a JUnit XML file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Log level for the JSON logs written to stderr.",
)
def check(
    namespaces: tuple[str, ...],
    kubeconfig: Path | None,
    context: str | None,
    fallback: bool | None,
    junit_path: Path | None,
    log_level: str | None,
) -> None:
    """Check that every static pod failure eventually reached its revision.

    Prints the result as JSON. Exits 1 when any failure is unresolved.
    """
    try:
        config = load_config()
        if namespaces:
            config.check.namespaces = validate_namespaces(namespaces)
        if log_level:
            config.log.level = validate_log_level(log_level)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    if kubeconfig is not None:
        config.cluster.kubeconfig = str(kubeconfig)
    if context:
        config.cluster.context = context
    if fallback is not None:
        config.check.fallback_enabled = fallback
    if junit_path is not None:
        config.report.junit_path = str(junit_path)

    setup_logging(config.log.level)
    log = get_logger("cli")

    result = asyncio.run(run_check(config))

    if config.report.junit_path:
        written = write_junit(result, config.report.junit_path, config.report.suite_name)
        log.info("junit report written", path=str(written))

    click.echo(json.dumps(dataclasses.asdict(result), indent=2))
    if not result.passed:
        raise SystemExit(1)
