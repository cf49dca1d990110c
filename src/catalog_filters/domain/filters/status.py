"""Filters on catalog processing state: orphaned entities and processing errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from catalog_filters.domain.model import ANNOTATION_ORPHAN

if TYPE_CHECKING:
    from catalog_filters.domain.filters.base import CatalogFilters
    from catalog_filters.domain.model import Entity


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True, slots=True)
class EntityOrphanFilter:
    value: bool

    def get_catalog_filters(self) -> CatalogFilters:
        return {f"metadata.annotations.{ANNOTATION_ORPHAN}": _bool_text(self.value)}

    def filter_entity(self, entity: Entity) -> bool:
        orphan = (entity.metadata.annotations or {}).get(ANNOTATION_ORPHAN)
        return orphan is not None and orphan == _bool_text(self.value)


@dataclass(frozen=True, slots=True)
class EntityErrorFilter:
    """Match entities by whether catalog processing reported errors for them.

    The catalog has no query field for processing errors, so this filter is
    client-side only.
    """

    value: bool

    def filter_entity(self, entity: Entity) -> bool:
        return entity.has_errors == self.value
