"""
Read-only catalog entity model:
metadata, free-form spec, relations and processing status.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalog_filters.domain.model.constants import DEFAULT_API_VERSION, DEFAULT_NAMESPACE
from catalog_filters.domain.model.refs import EntityRef

if TYPE_CHECKING:
    from collections.abc import Mapping


def _frozen_mapping[TValue](values: Mapping[str, TValue] | None) -> Mapping[str, TValue]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class EntityRelation:
    """A typed, directed edge to another entity."""

    type: str
    target_ref: str


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityMetadata:
    name: str
    namespace: str = DEFAULT_NAMESPACE
    title: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()
    annotations: Mapping[str, str] = field(default_factory=lambda: _frozen_mapping(None))
    labels: Mapping[str, str] = field(default_factory=lambda: _frozen_mapping(None))

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "annotations", _frozen_mapping(self.annotations))
        object.__setattr__(self, "labels", _frozen_mapping(self.labels))


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityStatusItem:
    type: str
    level: str = "error"
    message: str | None = None


@dataclass(frozen=True, slots=True)
class EntityStatus:
    items: tuple[EntityStatusItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True, kw_only=True)
class Entity:
    """A catalog record as handed over by the catalog fetching layer.

    Filters only read from entities; nothing in this package mutates them.
    """

    kind: str
    metadata: EntityMetadata
    spec: Mapping[str, object] = field(default_factory=lambda: _frozen_mapping(None))
    relations: tuple[EntityRelation, ...] = ()
    status: EntityStatus | None = None
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "spec", _frozen_mapping(self.spec))
        object.__setattr__(self, "relations", tuple(self.relations))

    @property
    def ref(self) -> EntityRef:
        return EntityRef(kind=self.kind, namespace=self.metadata.namespace, name=self.metadata.name)

    @property
    def has_errors(self) -> bool:
        return self.status is not None and len(self.status.items) > 0

    def spec_field(self, name: str) -> str | None:
        """Return a string-valued spec field, or ``None`` when absent or not a string."""
        value = self.spec.get(name)
        return value if isinstance(value, str) else None
