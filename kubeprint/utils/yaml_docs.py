"""Multi-document YAML helpers."""

import re
from typing import List

import yaml

from ..model.gvk import ConfigCollection, GroupVersionKind

YAML_DOCUMENT_SEPARATOR = "---\n"

_SEPARATOR_LINE = re.compile(rb"^---[ \t]*(?:#[^\r\n]*)?\r?$", re.MULTILINE)


def _chunks(data: bytes) -> List[bytes]:
    """Split raw YAML on document separator lines, dropping empty chunks."""
    return [chunk for chunk in _SEPARATOR_LINE.split(data) if chunk.strip()]


def split_yaml_documents(data: bytes) -> ConfigCollection:
    """Split a multi-document YAML blob into raw documents keyed by identity.

    Each document must declare ``apiVersion`` and ``kind``. The bytes of each
    document are kept exactly as they appear in ``data``.

    Raises:
        ValueError: if a document cannot be parsed, lacks ``apiVersion`` or
            ``kind``, or the same identity appears twice.
    """
    documents: ConfigCollection = {}

    for chunk in _chunks(data):
        try:
            parsed = yaml.safe_load(chunk)
        except yaml.YAMLError as e:
            raise ValueError(f"failed to parse YAML document: {e}") from e

        if not isinstance(parsed, dict):
            raise ValueError("YAML document is not a mapping")

        api_version = parsed.get("apiVersion")
        kind = parsed.get("kind")
        if not api_version or not kind:
            raise ValueError("invalid configuration: apiVersion and kind are required")

        gvk = GroupVersionKind.from_api_version(str(api_version), str(kind))
        if gvk in documents:
            raise ValueError(f"invalid configuration: {gvk} is specified twice")

        documents[gvk] = chunk

    return documents
