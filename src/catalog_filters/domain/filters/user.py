"""Filter on the current user's relationship to an entity (owned, starred)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalog_filters.domain.model import Entity

type EntityCheck = Callable[[Entity], bool]


class UserListFilterKind(StrEnum):
    OWNED = "owned"
    STARRED = "starred"
    ALL = "all"


@dataclass(frozen=True, slots=True)
class UserListFilter:
    """Delegate to the injected ownership or starred checks.

    Any value other than ``owned`` or ``starred`` lets every entity through.
    """

    value: UserListFilterKind | str
    is_owned_entity: EntityCheck = field(compare=False)
    is_starred_entity: EntityCheck = field(compare=False)

    def filter_entity(self, entity: Entity) -> bool:
        match self.value:
            case UserListFilterKind.OWNED:
                return self.is_owned_entity(entity)
            case UserListFilterKind.STARRED:
                return self.is_starred_entity(entity)
            case _:
                return True

    def to_query_value(self) -> str:
        return str(self.value)
