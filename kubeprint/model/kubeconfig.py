"""Kubeconfig file models."""

from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field


class NamedContext(BaseModel):
    """A named context entry."""

    name: str
    context: Dict[str, Any] = {}


class Kubeconfig(BaseModel):
    """The parts of a kubeconfig file needed to talk to a cluster."""

    api_version: str = Field("v1", alias="apiVersion")
    kind: str = "Config"
    clusters: List[Dict[str, Any]] = []
    contexts: List[NamedContext] = []
    users: List[Dict[str, Any]] = []
    current_context: Optional[str] = Field(None, alias="current-context")

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def context_names(self) -> List[str]:
        """Names of all contexts in the file."""
        return [context.name for context in self.contexts]
