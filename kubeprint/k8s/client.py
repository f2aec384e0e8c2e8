"""Kubernetes client wrapper."""

import subprocess
import json
from typing import List, Tuple, Optional, Dict, Any

from ..errors import ClusterConnectionError
from ..model.cluster import ConfigMap
from ..utils.logger import get_logger
from .kubeconfig import load_kubeconfig

logger = get_logger(__name__)


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        namespace: Optional[str] = None,
    ):
        self.kubeconfig = kubeconfig
        self.context = context
        self.namespace = namespace
        self._verify_kubectl()

    @classmethod
    def from_kubeconfig(cls, path: str) -> "K8sClient":
        """Build a client for the cluster described by a kubeconfig file."""
        kubeconfig = load_kubeconfig(path)
        logger.debug(
            f"Loaded kubeconfig {path} (current context: {kubeconfig.current_context or 'none'})"
        )
        return cls(kubeconfig=path)

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise ClusterConnectionError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with kubeconfig, context and namespace."""
        cmd = ["kubectl"]

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)

        if self.namespace and "--all-namespaces" not in args and "-n" not in args:
            cmd.extend(["-n", self.namespace])

        return cmd

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.debug(f"Command failed: {e.stderr}")
            return False, e.stderr

    def get_json(
        self, resource_type: str, name: Optional[str] = None, namespace: Optional[str] = None
    ) -> Tuple[bool, Optional[Dict[str, Any]], str]:
        """Get a resource as JSON.

        Returns the success flag, the parsed object and the raw kubectl output,
        which carries the error message on failure.
        """
        args = ["get", resource_type]

        if name:
            args.append(name)

        if namespace:
            args.extend(["-n", namespace])

        args.extend(["-o", "json"])

        success, output = self.execute(args)
        if not success:
            return False, None, output

        try:
            return True, json.loads(output), output
        except json.JSONDecodeError:
            return False, None, "failed to parse JSON output"

    def get_config_map(self, name: str, namespace: str) -> Optional[ConfigMap]:
        """Get a ConfigMap, or None if it does not exist.

        Raises:
            RuntimeError: if kubectl fails for any reason other than NotFound.
        """
        success, data, output = self.get_json("configmap", name, namespace=namespace)
        if success:
            return ConfigMap.from_manifest(data)

        if is_not_found(output):
            return None

        raise RuntimeError(output.strip() or f"failed to get configmap {namespace}/{name}")


def is_not_found(output: str) -> bool:
    """Check whether kubectl output reports a NotFound error."""
    return "(NotFound)" in output
