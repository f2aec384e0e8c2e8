"""Document exporters."""

from .documents import DocumentEmitter

__all__ = ["DocumentEmitter"]
