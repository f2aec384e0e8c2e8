"""Kubernetes interaction module."""

from .client import K8sClient
from .cluster import fetch_cluster_configuration
from .kubeconfig import DEFAULT_KUBECONFIG_PATH, load_kubeconfig, resolve_kubeconfig_path

__all__ = [
    "K8sClient",
    "DEFAULT_KUBECONFIG_PATH",
    "fetch_cluster_configuration",
    "load_kubeconfig",
    "resolve_kubeconfig_path",
]
