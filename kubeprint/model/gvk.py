"""Versioned kind identity."""

from typing import Dict

from pydantic import BaseModel


class GroupVersionKind(BaseModel):
    """Identifies a configuration schema by API group, version and kind.

    Instances are immutable and hashable so they can key a config collection.
    Ordering follows the canonical string form, ``"group/version, Kind=kind"``,
    which is the only sort key used when emitting documents.
    """

    group: str = ""
    version: str
    kind: str

    class Config:
        frozen = True

    @classmethod
    def from_api_version(cls, api_version: str, kind: str) -> "GroupVersionKind":
        """Build an identity from an ``apiVersion`` value and a kind."""
        if "/" in api_version:
            group, version = api_version.split("/", 1)
        else:
            group, version = "", api_version
        return cls(group=group, version=version, kind=kind)

    @property
    def api_version(self) -> str:
        """Render the ``apiVersion`` value for this identity."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def __str__(self) -> str:
        return f"{self.group}/{self.version}, Kind={self.kind}"

    def __lt__(self, other: "GroupVersionKind") -> bool:
        if not isinstance(other, GroupVersionKind):
            return NotImplemented
        return str(self) < str(other)


# Raw config documents keyed by identity. Enumeration order carries no meaning.
ConfigCollection = Dict[GroupVersionKind, bytes]
