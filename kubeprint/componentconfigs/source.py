"""Cluster-backed config source."""

from typing import List, Optional

from ..errors import ComponentConfigFetchError
from ..k8s.client import K8sClient
from ..k8s.cluster import KUBE_SYSTEM_NAMESPACE, fetch_cluster_configuration
from ..model.cluster import ClusterConfiguration
from ..model.gvk import ConfigCollection
from ..utils.logger import get_logger
from ..utils.yaml_docs import split_yaml_documents
from .base import KNOWN_HANDLERS, ComponentConfigHandler, ConfigSource

logger = get_logger(__name__)


class ClusterConfigSource(ConfigSource):
    """Reads component configs from their ConfigMaps in kube-system."""

    def __init__(self, handlers: Optional[List[ComponentConfigHandler]] = None):
        self.handlers = handlers if handlers is not None else KNOWN_HANDLERS

    def fetch_unsupported(self, client: K8sClient) -> ConfigCollection:
        cluster_config = fetch_cluster_configuration(client)
        return self.fetch_unsupported_for(cluster_config, client)

    def fetch_unsupported_for(
        self, cluster_config: ClusterConfiguration, client: K8sClient
    ) -> ConfigCollection:
        """Collect unsupported configs of every handler for a known cluster config."""
        collection: ConfigCollection = {}

        for handler in self.handlers:
            documents = self._fetch_component(handler, cluster_config, client)
            for gvk, document in documents.items():
                if handler.is_unsupported(gvk):
                    logger.debug(
                        f"{handler.name}: {gvk.api_version} requires manual upgrade "
                        f"to {handler.supported.api_version}"
                    )
                    collection[gvk] = document

        logger.debug(f"Found {len(collection)} unsupported component config(s)")
        return collection

    def _fetch_component(
        self,
        handler: ComponentConfigHandler,
        cluster_config: ClusterConfiguration,
        client: K8sClient,
    ) -> ConfigCollection:
        try:
            name = handler.config_map_for(cluster_config)
        except ValueError as e:
            raise ComponentConfigFetchError(f"{handler.name}: {e}") from e

        try:
            config_map = client.get_config_map(name, KUBE_SYSTEM_NAMESPACE)
        except RuntimeError as e:
            raise ComponentConfigFetchError(f"failed to get config map {name}: {e}") from e

        if config_map is None:
            logger.debug(f"{handler.name}: config map {name} not found, skipping")
            return {}

        raw = config_map.data.get(handler.config_map_key)
        if raw is None:
            raise ComponentConfigFetchError(
                f"unexpected error when reading {name} ConfigMap: "
                f"{handler.config_map_key} key value pair missing"
            )

        try:
            return split_yaml_documents(raw.encode("utf-8"))
        except ValueError as e:
            raise ComponentConfigFetchError(f"{handler.name}: {e}") from e
