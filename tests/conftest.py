"""Test configuration and fixtures."""

import pytest
from unittest.mock import Mock
from typing import Dict, Optional

import yaml

from kubeprint.componentconfigs import ConfigSource
from kubeprint.k8s.client import K8sClient
from kubeprint.model.cluster import ConfigMap
from kubeprint.model.gvk import ConfigCollection, GroupVersionKind


class InMemoryConfigSource(ConfigSource):
    """Config source returning a fixed collection."""

    def __init__(self, collection: ConfigCollection):
        self.collection = collection
        self.calls = 0

    def fetch_unsupported(self, client) -> ConfigCollection:
        self.calls += 1
        return dict(self.collection)


class FailingConfigSource(ConfigSource):
    """Config source that always raises the given error."""

    def __init__(self, error: Exception):
        self.error = error

    def fetch_unsupported(self, client) -> ConfigCollection:
        raise self.error


def _mock_config_map_client(config_maps: Dict[str, Optional[ConfigMap]]) -> Mock:
    """Mock client serving ConfigMaps by name; unknown names are NotFound."""
    client = Mock(spec=K8sClient)
    client.get_config_map.side_effect = lambda name, namespace: config_maps.get(name)
    return client


@pytest.fixture
def config_map_client():
    """Factory for mock clients serving a fixed set of ConfigMaps."""
    return _mock_config_map_client


@pytest.fixture
def in_memory_source():
    """Factory for config sources returning a fixed collection."""
    return InMemoryConfigSource


@pytest.fixture
def failing_source():
    """Factory for config sources raising a given error."""
    return FailingConfigSource


@pytest.fixture
def two_doc_collection() -> ConfigCollection:
    """The two-document collection from the emitter contract."""
    return {
        GroupVersionKind(group="g2", version="v1", kind="K2"): b"bar: 2",
        GroupVersionKind(group="g1", version="v1", kind="K1"): b"  foo: 1\n",
    }


@pytest.fixture
def kubeadm_config_map() -> ConfigMap:
    """kubeadm-config ConfigMap for a 1.19 cluster."""
    cluster_configuration = {
        "apiVersion": "kubeadm.k8s.io/v1beta2",
        "kind": "ClusterConfiguration",
        "kubernetesVersion": "v1.19.3",
        "clusterName": "kubernetes",
        "networking": {"podSubnet": "10.244.0.0/16"},
    }
    return ConfigMap(
        name="kubeadm-config",
        namespace="kube-system",
        data={"ClusterConfiguration": yaml.safe_dump(cluster_configuration)},
    )


@pytest.fixture
def kubelet_v1beta1_config_map() -> ConfigMap:
    """kubelet ConfigMap holding the supported version."""
    return ConfigMap(
        name="kubelet-config-1.19",
        namespace="kube-system",
        data={
            "kubelet": "apiVersion: kubelet.config.k8s.io/v1beta1\n"
            "kind: KubeletConfiguration\n"
            "cgroupDriver: systemd\n"
        },
    )


@pytest.fixture
def kube_proxy_v1alpha2_config_map() -> ConfigMap:
    """kube-proxy ConfigMap holding a version without automatic migration."""
    return ConfigMap(
        name="kube-proxy",
        namespace="kube-system",
        data={
            "config.conf": "apiVersion: kubeproxy.config.k8s.io/v1alpha2\n"
            "kind: KubeProxyConfiguration\n"
            "mode: ipvs\n",
            "kubeconfig.conf": "apiVersion: v1\nkind: Config\n",
        },
    )


@pytest.fixture
def kubeconfig_file(tmp_path):
    """A minimal valid kubeconfig file."""
    path = tmp_path / "admin.conf"
    path.write_text(
        yaml.safe_dump(
            {
                "apiVersion": "v1",
                "kind": "Config",
                "clusters": [
                    {"name": "kubernetes", "cluster": {"server": "https://10.0.0.1:6443"}}
                ],
                "contexts": [
                    {
                        "name": "kubernetes-admin@kubernetes",
                        "context": {"cluster": "kubernetes", "user": "kubernetes-admin"},
                    }
                ],
                "users": [{"name": "kubernetes-admin", "user": {}}],
                "current-context": "kubernetes-admin@kubernetes",
            }
        )
    )
    return path
