"""Cluster client factory."""

from __future__ import annotations

from typing import Any

from staticpod_audit.models.config import ClusterConfig
from staticpod_audit.observability.logging import get_logger

_log = get_logger("collector.client")


class ClusterConnectionError(Exception):
    """Raised when no usable Kubernetes client can be built."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"unable to build kubernetes client: {cause}")
        self.cause = cause


async def new_client(cluster: ClusterConfig) -> Any:
    """Return a kubernetes-asyncio ``ApiClient`` for *cluster*.

    An explicit kubeconfig or context is loaded as given. Otherwise the
    in-cluster service account is tried first, then the default kubeconfig.
    The caller owns the returned client and must ``await client.close()``.
    """
    try:
        # Import lazily, kubernetes-asyncio attempts cluster auto-detection
        # on import in some versions.
        from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
        from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]

        configuration = k8s_client.Configuration()
        if cluster.kubeconfig or cluster.context:
            await k8s_config.load_kube_config(
                config_file=cluster.kubeconfig or None,
                context=cluster.context or None,
                client_configuration=configuration,
            )
            _log.info("k8s client configured from kubeconfig", path=cluster.kubeconfig, context=cluster.context)
        else:
            try:
                k8s_config.load_incluster_config(client_configuration=configuration)
                _log.info("k8s client configured from in-cluster service account")
            except k8s_config.ConfigException:
                await k8s_config.load_kube_config(client_configuration=configuration)
                _log.info("k8s client configured from kubeconfig")

        return k8s_client.ApiClient(configuration=configuration)
    except Exception as exc:
        raise ClusterConnectionError(exc) from exc
