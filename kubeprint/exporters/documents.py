"""Deterministic multi-document YAML emitter."""

import io
from typing import BinaryIO, Dict, List, Union

from ..errors import AmbiguousIdentityError
from ..model.gvk import ConfigCollection, GroupVersionKind
from ..utils.logger import get_logger
from ..utils.yaml_docs import YAML_DOCUMENT_SEPARATOR

logger = get_logger(__name__)


class DocumentEmitter:
    """Writes a config collection as a sorted stream of YAML documents.

    Config collections come from unordered sources, so the output would vary
    between runs if the mapping were written in enumeration order. The emitter
    sorts identities by their canonical string and writes, for each one, the
    document separator followed by the trimmed document and a newline.
    """

    separator: bytes = YAML_DOCUMENT_SEPARATOR.encode("utf-8")

    def sorted_identities(self, collection: ConfigCollection) -> List[GroupVersionKind]:
        """Return the identities of ``collection`` in emission order."""
        rendered: Dict[str, GroupVersionKind] = {}
        for gvk in collection:
            key = str(gvk)
            if key in rendered:
                raise AmbiguousIdentityError(
                    f"identities {rendered[key]!r} and {gvk!r} both render as {key!r}"
                )
            rendered[key] = gvk

        return sorted(rendered.values())

    def emit(self, collection: ConfigCollection, out: BinaryIO) -> int:
        """Write ``collection`` to ``out`` and return the number of documents."""
        gvks = self.sorted_identities(collection)

        for gvk in gvks:
            out.write(self.separator)
            out.write(_as_bytes(collection[gvk]).strip())
            out.write(b"\n")

        out.flush()
        logger.debug(f"Emitted {len(gvks)} document(s)")
        return len(gvks)

    def render(self, collection: ConfigCollection) -> bytes:
        """Return the emitted stream for ``collection`` as bytes."""
        buffer = io.BytesIO()
        self.emit(collection, buffer)
        return buffer.getvalue()


def _as_bytes(document: Union[bytes, str]) -> bytes:
    if isinstance(document, str):
        return document.encode("utf-8")
    return document
