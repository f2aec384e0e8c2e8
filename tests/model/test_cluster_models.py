"""Unit tests for cluster and kubeconfig models."""

from kubeprint.model.cluster import ClusterConfiguration, ConfigMap
from kubeprint.model.kubeconfig import Kubeconfig


class TestClusterModels:
    def test_config_map_from_manifest(self):
        config_map = ConfigMap.from_manifest(
            {
                "apiVersion": "v1",
                "kind": "ConfigMap",
                "metadata": {"name": "kube-proxy", "namespace": "kube-system"},
                "data": {"config.conf": "mode: ipvs"},
            }
        )

        assert config_map.name == "kube-proxy"
        assert config_map.namespace == "kube-system"
        assert config_map.data == {"config.conf": "mode: ipvs"}

    def test_config_map_without_data(self):
        config_map = ConfigMap.from_manifest({"metadata": {"name": "empty"}, "data": None})
        assert config_map.data == {}

    def test_cluster_configuration_aliases(self):
        config = ClusterConfiguration(
            apiVersion="kubeadm.k8s.io/v1beta2",
            kind="ClusterConfiguration",
            kubernetesVersion="v1.19.3",
            networking={"podSubnet": "10.244.0.0/16"},
        )

        assert config.api_version == "kubeadm.k8s.io/v1beta2"
        assert config.kubernetes_version == "v1.19.3"
        assert config.cluster_name == ""


class TestKubeconfig:
    def test_current_context_alias(self):
        kubeconfig = Kubeconfig(
            **{
                "clusters": [{"name": "c"}],
                "contexts": [{"name": "admin@c", "context": {"cluster": "c"}}],
                "current-context": "admin@c",
            }
        )

        assert kubeconfig.current_context == "admin@c"
        assert kubeconfig.context_names == ["admin@c"]
