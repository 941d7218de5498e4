"""The Template resource: workflow templates stored as YAML text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tinkcore.meta import ObjectMeta, TypeMeta

__all__ = [
    "TEMPLATE_ID_ANNOTATION",
    "TemplateState",
    "TemplateSpec",
    "TemplateStatus",
    "Template",
    "TemplateList",
]

TEMPLATE_ID_ANNOTATION = "template.tinkerbell.org/id"


class TemplateState(str, Enum):
    """Observed state of a template."""

    ERROR = "Error"
    READY = "Ready"


@dataclass
class TemplateSpec:
    """Desired state of a template: its YAML body, if any."""

    data: str | None = None


@dataclass
class TemplateStatus:
    """Observed state of a template."""

    state: TemplateState | None = None


@dataclass
class Template:
    """A workflow template."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: TemplateSpec = field(default_factory=TemplateSpec)
    status: TemplateStatus = field(default_factory=TemplateStatus)

    @property
    def tink_id(self) -> str:
        """The Tinkerbell ID stored in the annotations, or an empty string."""
        return (self.metadata.annotations or {}).get(TEMPLATE_ID_ANNOTATION, "")

    @tink_id.setter
    def tink_id(self, value: str) -> None:
        if self.metadata.annotations is None:
            self.metadata.annotations = {}
        self.metadata.annotations[TEMPLATE_ID_ANNOTATION] = value


@dataclass
class TemplateList:
    """A list of Template resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    items: list[Template] = field(default_factory=list)