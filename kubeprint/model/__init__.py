"""Data models for kubeprint."""

from .cluster import ClusterConfiguration, ConfigMap
from .gvk import ConfigCollection, GroupVersionKind
from .kubeconfig import Kubeconfig, NamedContext

__all__ = [
    "ClusterConfiguration",
    "ConfigCollection",
    "ConfigMap",
    "GroupVersionKind",
    "Kubeconfig",
    "NamedContext",
]
