"""Entity filter variants and their capability contracts."""

from __future__ import annotations

from catalog_filters.domain.filters.base import (
    CatalogFilters,
    CatalogFilterSource,
    CatalogFilterValue,
    EntityFilter,
    EntityPredicate,
    FilterCapability,
    QueryValue,
    QueryValueSource,
    capabilities_of,
)
from catalog_filters.domain.filters.catalog import (
    OWNER_DEFAULT_KIND,
    EntityKindFilter,
    EntityLifecycleFilter,
    EntityNamespaceFilter,
    EntityOwnerFilter,
    EntityTagFilter,
    EntityTypeFilter,
)
from catalog_filters.domain.filters.status import EntityErrorFilter, EntityOrphanFilter
from catalog_filters.domain.filters.text import CaseFold, EntityTextFilter, upper_fold
from catalog_filters.domain.filters.user import EntityCheck, UserListFilter, UserListFilterKind

__all__ = [  # noqa: RUF022
    # capabilities
    "CatalogFilters",
    "CatalogFilterSource",
    "CatalogFilterValue",
    "EntityFilter",
    "EntityPredicate",
    "FilterCapability",
    "QueryValue",
    "QueryValueSource",
    "capabilities_of",
    # catalog-backed
    "OWNER_DEFAULT_KIND",
    "EntityKindFilter",
    "EntityTypeFilter",
    "EntityTagFilter",
    "EntityOwnerFilter",
    "EntityLifecycleFilter",
    "EntityNamespaceFilter",
    # text
    "CaseFold",
    "EntityTextFilter",
    "upper_fold",
    # user
    "EntityCheck",
    "UserListFilter",
    "UserListFilterKind",
    # status
    "EntityOrphanFilter",
    "EntityErrorFilter",
]
