"""Relation lookup over an entity's relation list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catalog_filters.domain.model.refs import EntityRefParseError, parse_entity_ref

if TYPE_CHECKING:
    from catalog_filters.domain.model.entity import Entity
    from catalog_filters.domain.model.refs import EntityRef

log = logging.getLogger(__name__)


def get_entity_relations(
    entity: Entity,
    relation_type: str,
    *,
    kind: str | None = None,
) -> tuple[EntityRef, ...]:
    """Return the targets of every ``relation_type`` relation, in the order listed.

    The type comparison is exact. ``kind`` optionally narrows the result to
    targets of that kind (case-insensitive). Targets that are not valid
    references are skipped.
    """

    targets: list[EntityRef] = []
    for relation in entity.relations or ():
        if relation.type != relation_type:
            continue
        try:
            target = parse_entity_ref(relation.target_ref)
        except EntityRefParseError:
            log.debug(
                "Skipping unparsable %s target %r on %s",
                relation_type,
                relation.target_ref,
                entity.metadata.name,
            )
            continue
        if kind is not None and target.kind.lower() != kind.lower():
            continue
        targets.append(target)
    return tuple(targets)
