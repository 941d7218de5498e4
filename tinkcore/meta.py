"""Object metadata shared by the tinkerbell.org resource kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

__all__ = ["GroupVersion", "TypeMeta", "ObjectMeta", "GROUP_VERSION"]


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with its version."""

    group: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}/{self.version}"


GROUP_VERSION = GroupVersion(group="tinkerbell.org", version="v1alpha1")


@dataclass
class TypeMeta:
    """The kind and API version of a resource."""

    kind: str = ""
    api_version: str = ""


@dataclass
class ObjectMeta:
    """Identity, annotations and lifecycle timestamps of a resource."""

    name: str = ""
    namespace: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    resource_version: str = ""
    creation_timestamp: datetime | None = None
    deletion_timestamp: datetime | None = None

    def is_deleted(self) -> bool:
        """Return True once the resource carries a deletion timestamp."""
        return self.deletion_timestamp is not None