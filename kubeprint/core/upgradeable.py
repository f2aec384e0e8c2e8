"""Print component configs that need manual upgrading."""

from typing import BinaryIO, Optional

from ..componentconfigs import ClusterConfigSource, ConfigSource
from ..exporters import DocumentEmitter
from ..k8s.client import K8sClient
from ..utils.logger import get_logger

logger = get_logger(__name__)


class UpgradeablePrinter:
    """Collects unsupported component configs and writes them as YAML."""

    def __init__(
        self,
        source: Optional[ConfigSource] = None,
        emitter: Optional[DocumentEmitter] = None,
    ):
        self.source = source or ClusterConfigSource()
        self.emitter = emitter or DocumentEmitter()

    def print(self, client: K8sClient, out: BinaryIO) -> int:
        """Fetch the whole collection, then emit it to ``out``.

        Any fetch error propagates before a single byte is written.
        Returns the number of documents written.
        """
        collection = self.source.fetch_unsupported(client)
        count = self.emitter.emit(collection, out)
        logger.debug(f"{count} component config(s) need manual upgrading")
        return count
