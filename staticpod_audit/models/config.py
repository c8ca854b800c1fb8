"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_NAMESPACES: tuple[str, ...] = (
    "openshift-etcd-operator",
    "openshift-kube-apiserver-operator",
    "openshift-kube-controller-manager-operator",
    "openshift-kube-scheduler-operator",
)

# The clusteroperator status roll-up repeats the failure note verbatim.
DEFAULT_SKIP_REASONS: tuple[str, ...] = ("OperatorStatusChanged",)

STATIC_POD_TEST_NAME = "[sig-node] static pods should start after being created"


@dataclass
class ClusterConfig:
    """How to reach the cluster. Empty values mean auto-detect."""

    kubeconfig: str = ""
    context: str = ""


@dataclass
class CheckConfig:
    """Static pod check configuration."""

    namespaces: tuple[str, ...] = DEFAULT_NAMESPACES
    skip_reasons: tuple[str, ...] = DEFAULT_SKIP_REASONS
    fallback_enabled: bool = True
    test_name: str = STATIC_POD_TEST_NAME


@dataclass
class ReportConfig:
    """Report output configuration."""

    junit_path: str = ""
    suite_name: str = "openshift-tests"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class AuditConfig:
    """Top-level staticpod-audit configuration."""

    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    check: CheckConfig = field(default_factory=CheckConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    log: LogConfig = field(default_factory=LogConfig)
