"""kubeadm cluster configuration retrieval."""

import yaml
from pydantic import ValidationError

from ..errors import ClusterConfigFetchError
from ..model.cluster import ClusterConfiguration
from ..utils.logger import get_logger
from .client import K8sClient

logger = get_logger(__name__)

KUBE_SYSTEM_NAMESPACE = "kube-system"
KUBEADM_CONFIG_CONFIGMAP = "kubeadm-config"
CLUSTER_CONFIGURATION_KEY = "ClusterConfiguration"
CLUSTER_CONFIGURATION_KIND = "ClusterConfiguration"


def fetch_cluster_configuration(client: K8sClient) -> ClusterConfiguration:
    """Read the kubeadm ClusterConfiguration stored in the cluster.

    Component configs are not fetched here.
    """
    logger.debug(f"Reading configuration from {KUBE_SYSTEM_NAMESPACE}/{KUBEADM_CONFIG_CONFIGMAP}")

    try:
        config_map = client.get_config_map(KUBEADM_CONFIG_CONFIGMAP, KUBE_SYSTEM_NAMESPACE)
    except RuntimeError as e:
        raise ClusterConfigFetchError(
            f"failed to get config map {KUBEADM_CONFIG_CONFIGMAP}: {e}"
        ) from e

    if config_map is None:
        raise ClusterConfigFetchError(
            f"config map {KUBE_SYSTEM_NAMESPACE}/{KUBEADM_CONFIG_CONFIGMAP} not found"
        )

    raw = config_map.data.get(CLUSTER_CONFIGURATION_KEY)
    if raw is None:
        raise ClusterConfigFetchError(
            f"unexpected error when reading {KUBEADM_CONFIG_CONFIGMAP} ConfigMap: "
            f"{CLUSTER_CONFIGURATION_KEY} key value pair missing"
        )

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ClusterConfigFetchError(f"failed to parse {CLUSTER_CONFIGURATION_KEY}: {e}") from e

    if not isinstance(data, dict):
        raise ClusterConfigFetchError(f"{CLUSTER_CONFIGURATION_KEY} is not a mapping")

    try:
        cluster_config = ClusterConfiguration(**data)
    except ValidationError as e:
        raise ClusterConfigFetchError(f"invalid {CLUSTER_CONFIGURATION_KEY}: {e}") from e

    if cluster_config.kind != CLUSTER_CONFIGURATION_KIND:
        raise ClusterConfigFetchError(
            f"unexpected kind {cluster_config.kind!r} in {KUBEADM_CONFIG_CONFIGMAP}, "
            f"expected {CLUSTER_CONFIGURATION_KIND!r}"
        )

    logger.debug(f"Cluster runs Kubernetes {cluster_config.kubernetes_version or 'unknown'}")
    return cluster_config
