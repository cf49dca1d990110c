"""Free-text filter over entity name, title and tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from catalog_filters.domain.model import Entity

type CaseFold = Callable[[str], str]


def upper_fold(value: str) -> str:
    return value.upper()


def _folded(values: Iterable[str | None], fold: CaseFold) -> tuple[str, ...]:
    return tuple(fold(value) for value in values if value)


@dataclass(frozen=True, slots=True)
class EntityTextFilter:
    """Match entities where every word of ``value`` is found.

    A word is found when it equals one of the entity's tags, or occurs anywhere
    in the entity's name or title; both comparisons go through ``fold`` first.
    A value with no words matches every entity.
    """

    value: str
    fold: CaseFold = field(default=upper_fold, kw_only=True, compare=False)

    @property
    def words(self) -> tuple[str, ...]:
        return _folded(self.value.split(), self.fold)

    def filter_entity(self, entity: Entity) -> bool:
        metadata = entity.metadata
        exact = _folded(metadata.tags or (), self.fold)
        partial = _folded((metadata.name, metadata.title), self.fold)
        for word in self.words:
            if word not in exact and not any(word in candidate for candidate in partial):
                return False
        return True
