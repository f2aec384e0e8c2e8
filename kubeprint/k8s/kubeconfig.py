"""Kubeconfig path resolution and loading."""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ClusterConnectionError
from ..model.kubeconfig import Kubeconfig
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_KUBECONFIG_PATH = "/etc/kubernetes/admin.conf"


def resolve_kubeconfig_path(path: Optional[str] = None) -> str:
    """Resolve the kubeconfig file to use.

    An explicit path other than the default always wins. Otherwise the first
    entry of ``KUBECONFIG`` is used when the variable is set, falling back to
    the kubeadm admin kubeconfig.
    """
    if path and path != DEFAULT_KUBECONFIG_PATH:
        return path

    env_value = os.environ.get("KUBECONFIG", "")
    for entry in env_value.split(os.pathsep):
        if entry:
            logger.debug(f"Using kubeconfig from KUBECONFIG: {entry}")
            return entry

    return DEFAULT_KUBECONFIG_PATH


def load_kubeconfig(path: Union[str, Path]) -> Kubeconfig:
    """Load and validate a kubeconfig file."""
    path = Path(path)

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ClusterConnectionError(f"failed to load admin kubeconfig {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ClusterConnectionError(f"failed to parse kubeconfig {path}: {e}") from e

    if not isinstance(data, dict):
        raise ClusterConnectionError(f"invalid kubeconfig {path}: not a mapping")

    try:
        kubeconfig = Kubeconfig(**data)
    except ValidationError as e:
        raise ClusterConnectionError(f"invalid kubeconfig {path}: {e}") from e

    if not kubeconfig.clusters:
        raise ClusterConnectionError(f"invalid kubeconfig {path}: no clusters defined")

    if kubeconfig.current_context and kubeconfig.current_context not in kubeconfig.context_names:
        raise ClusterConnectionError(
            f"invalid kubeconfig {path}: current context {kubeconfig.current_context!r} not found"
        )

    return kubeconfig
