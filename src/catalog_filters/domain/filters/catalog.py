"""Filters over catalog fields that the remote catalog can evaluate as well."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Self

from catalog_filters.domain.filters.base import as_value_tuple
from catalog_filters.domain.model import (
    DEFAULT_NAMESPACE,
    RELATION_OWNED_BY,
    get_entity_relations,
    normalize_entity_refs,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from catalog_filters.domain.filters.base import CatalogFilters
    from catalog_filters.domain.model import Entity

OWNER_DEFAULT_KIND: Final[str] = "Group"


@dataclass(frozen=True, slots=True)
class EntityKindFilter:
    """Filter entities on kind. Evaluated by the catalog only."""

    value: str

    def get_catalog_filters(self) -> CatalogFilters:
        return {"kind": self.value}

    def to_query_value(self) -> str:
        return self.value

    @classmethod
    def from_query_value(cls, value: str | Sequence[str]) -> Self:
        values = as_value_tuple(value)
        if not values or not values[0]:
            raise ValueError("Kind filter needs a non-empty kind")
        return cls(values[0])


@dataclass(frozen=True, slots=True)
class EntityTypeFilter:
    """Filter entities on ``spec.type``. Evaluated by the catalog only."""

    value: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_value_tuple(self.value))

    def get_types(self) -> list[str]:
        return list(self.value)

    def get_catalog_filters(self) -> CatalogFilters:
        return {"spec.type": self.get_types()}

    def to_query_value(self) -> list[str]:
        return self.get_types()

    @classmethod
    def from_query_value(cls, value: str | Sequence[str]) -> Self:
        return cls(as_value_tuple(value))


@dataclass(frozen=True, slots=True)
class EntityTagFilter:
    """Match entities carrying every configured tag."""

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", as_value_tuple(self.values))

    def filter_entity(self, entity: Entity) -> bool:
        tags = entity.metadata.tags or ()
        return all(value in tags for value in self.values)

    def get_catalog_filters(self) -> CatalogFilters:
        return {"metadata.tags": list(self.values)}

    def to_query_value(self) -> list[str]:
        return list(self.values)

    @classmethod
    def from_query_value(cls, value: str | Sequence[str]) -> Self:
        return cls(as_value_tuple(value))


@dataclass(frozen=True, slots=True)
class EntityLifecycleFilter:
    """Match entities whose ``spec.lifecycle`` is one of the configured values."""

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", as_value_tuple(self.values))

    def filter_entity(self, entity: Entity) -> bool:
        lifecycle = entity.spec_field("lifecycle")
        return lifecycle is not None and lifecycle in self.values

    def get_catalog_filters(self) -> CatalogFilters:
        return {"spec.lifecycle": list(self.values)}

    def to_query_value(self) -> list[str]:
        return list(self.values)

    @classmethod
    def from_query_value(cls, value: str | Sequence[str]) -> Self:
        return cls(as_value_tuple(value))


@dataclass(frozen=True, slots=True)
class EntityNamespaceFilter:
    """Match entities living in one of the configured namespaces."""

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", as_value_tuple(self.values))

    def filter_entity(self, entity: Entity) -> bool:
        return entity.metadata.namespace in self.values

    def get_catalog_filters(self) -> CatalogFilters:
        return {"metadata.namespace": list(self.values)}

    def to_query_value(self) -> list[str]:
        return list(self.values)

    @classmethod
    def from_query_value(cls, value: str | Sequence[str]) -> Self:
        return cls(as_value_tuple(value))


@dataclass(frozen=True, slots=True, init=False)
class EntityOwnerFilter:
    """Match entities owned by any of the configured owners.

    Owner references are normalized to their canonical form on construction
    (bare names default to kind ``Group``). References that cannot be parsed are
    dropped, so the filter may end up with fewer values than it was given, or
    none at all, in which case it matches nothing.
    """

    values: tuple[str, ...]

    def __init__(
        self,
        values: str | Iterable[str],
        *,
        default_kind: str = OWNER_DEFAULT_KIND,
        default_namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        normalized = normalize_entity_refs(
            as_value_tuple(values) if isinstance(values, str) else values,
            default_kind,
            default_namespace=default_namespace,
        )
        object.__setattr__(self, "values", normalized)

    def filter_entity(self, entity: Entity) -> bool:
        owners = {str(owner) for owner in get_entity_relations(entity, RELATION_OWNED_BY)}
        return any(value in owners for value in self.values)

    def get_catalog_filters(self) -> CatalogFilters:
        return {"relations.ownedBy": list(self.values)}

    def to_query_value(self) -> list[str]:
        return list(self.values)

    @classmethod
    def from_query_value(cls, value: str | Sequence[str]) -> Self:
        return cls(as_value_tuple(value))
