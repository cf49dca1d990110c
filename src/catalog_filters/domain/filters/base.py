"""Capability contracts shared by every entity filter.

A filter supports up to three capabilities. Each one is a separate structural
protocol; a filter that cannot provide a capability does not define the method
at all, so consumers detect support with ``isinstance`` (or
:func:`capabilities_of`) instead of catching a failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from catalog_filters.domain.model import Entity

type CatalogFilterValue = str | list[str]
type CatalogFilters = dict[str, CatalogFilterValue]
type QueryValue = str | list[str]


class FilterCapability(StrEnum):
    FILTER_ENTITY = "filter_entity"
    CATALOG_FILTERS = "get_catalog_filters"
    QUERY_VALUE = "to_query_value"


@runtime_checkable
class EntityPredicate(Protocol):
    """Client-side predicate over a single entity."""

    def filter_entity(self, entity: Entity) -> bool: ...


@runtime_checkable
class CatalogFilterSource(Protocol):
    """Declarative field-path filter a remote catalog query engine understands."""

    def get_catalog_filters(self) -> CatalogFilters: ...


@runtime_checkable
class QueryValueSource(Protocol):
    """Value for a single URL query parameter."""

    def to_query_value(self) -> QueryValue: ...


type EntityFilter = EntityPredicate | CatalogFilterSource | QueryValueSource

_CAPABILITY_PROTOCOLS: tuple[tuple[FilterCapability, type], ...] = (
    (FilterCapability.FILTER_ENTITY, EntityPredicate),
    (FilterCapability.CATALOG_FILTERS, CatalogFilterSource),
    (FilterCapability.QUERY_VALUE, QueryValueSource),
)


def capabilities_of(entity_filter: object) -> frozenset[FilterCapability]:
    return frozenset(
        capability
        for capability, protocol in _CAPABILITY_PROTOCOLS
        if isinstance(entity_filter, protocol)
    )


def as_value_tuple(values: str | Sequence[str] | None) -> tuple[str, ...]:
    """Coerce a scalar-or-sequence configuration value into an immutable tuple."""
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)
