"""Component config handling."""

from .base import (
    KNOWN_HANDLERS,
    KUBE_PROXY,
    KUBELET,
    ComponentConfigHandler,
    ConfigSource,
)
from .source import ClusterConfigSource

__all__ = [
    "KNOWN_HANDLERS",
    "KUBE_PROXY",
    "KUBELET",
    "ComponentConfigHandler",
    "ConfigSource",
    "ClusterConfigSource",
]
