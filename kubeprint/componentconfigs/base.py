"""Config source interface and component config handlers."""

from abc import ABC, abstractmethod
import re
from typing import Optional

from ..k8s.client import K8sClient
from ..model.cluster import ClusterConfiguration
from ..model.gvk import ConfigCollection, GroupVersionKind


class ConfigSource(ABC):
    """Supplies the component configs that need manual upgrading."""

    @abstractmethod
    def fetch_unsupported(self, client: K8sClient) -> ConfigCollection:
        """Fetch every unsupported config document.

        Implementations raise on failure and never return a partial collection.
        """
        pass


def parse_version(version_string: str) -> Optional[tuple[int, int]]:
    """Parse Kubernetes version string to major.minor tuple."""
    match = re.match(r"v?(\d+)\.(\d+)", version_string)
    if match:
        return int(match.group(1)), int(match.group(2))
    return None


class ComponentConfigHandler:
    """Describes where a component config lives and which version is supported."""

    def __init__(
        self,
        name: str,
        group: str,
        version: str,
        kind: str,
        config_map_name: str,
        config_map_key: str,
        versioned_config_map: bool = False,
    ):
        self.name = name
        self.supported = GroupVersionKind(group=group, version=version, kind=kind)
        self.config_map_name = config_map_name
        self.config_map_key = config_map_key
        self.versioned_config_map = versioned_config_map

    def __repr__(self) -> str:
        return f"ComponentConfigHandler({self.name!r}, {str(self.supported)!r})"

    def config_map_for(self, cluster_config: ClusterConfiguration) -> str:
        """Name of the ConfigMap holding this component's config."""
        if not self.versioned_config_map:
            return self.config_map_name

        parsed = parse_version(cluster_config.kubernetes_version)
        if not parsed:
            raise ValueError(
                f"could not parse kubernetesVersion {cluster_config.kubernetes_version!r}"
            )
        major, minor = parsed
        return f"{self.config_map_name}-{major}.{minor}"

    def is_unsupported(self, gvk: GroupVersionKind) -> bool:
        """Check if a document belongs to this component but in another version."""
        return gvk.group == self.supported.group and gvk.version != self.supported.version


KUBELET = ComponentConfigHandler(
    name="kubelet",
    group="kubelet.config.k8s.io",
    version="v1beta1",
    kind="KubeletConfiguration",
    config_map_name="kubelet-config",
    config_map_key="kubelet",
    versioned_config_map=True,
)

KUBE_PROXY = ComponentConfigHandler(
    name="kubeproxy",
    group="kubeproxy.config.k8s.io",
    version="v1alpha1",
    kind="KubeProxyConfiguration",
    config_map_name="kube-proxy",
    config_map_key="config.conf",
)

KNOWN_HANDLERS = [KUBELET, KUBE_PROXY]
