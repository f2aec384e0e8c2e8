"""Cluster-related models."""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ConfigMap(BaseModel):
    """The parts of a ConfigMap that kubeprint reads."""

    name: str
    namespace: Optional[str] = None
    data: Dict[str, str] = {}

    @classmethod
    def from_manifest(cls, manifest: Dict[str, Any]) -> "ConfigMap":
        """Build a ConfigMap from its JSON representation."""
        metadata = manifest.get("metadata", {})
        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace"),
            data=manifest.get("data") or {},
        )


class ClusterConfiguration(BaseModel):
    """kubeadm ClusterConfiguration as stored in the kubeadm-config ConfigMap."""

    api_version: str = Field(alias="apiVersion")
    kind: str
    kubernetes_version: str = Field("", alias="kubernetesVersion")
    cluster_name: str = Field("", alias="clusterName")
    control_plane_endpoint: str = Field("", alias="controlPlaneEndpoint")
    image_repository: str = Field("", alias="imageRepository")

    class Config:
        populate_by_name = True
        extra = "allow"
