"""Public domain model surface."""

from __future__ import annotations

from catalog_filters.domain.model.constants import (
    ANNOTATION_ORPHAN,
    DEFAULT_API_VERSION,
    DEFAULT_NAMESPACE,
    RELATION_API_CONSUMED_BY,
    RELATION_API_PROVIDED_BY,
    RELATION_CHILD_OF,
    RELATION_CONSUMES_API,
    RELATION_DEPENDENCY_OF,
    RELATION_DEPENDS_ON,
    RELATION_HAS_MEMBER,
    RELATION_HAS_PART,
    RELATION_MEMBER_OF,
    RELATION_OWNED_BY,
    RELATION_OWNER_OF,
    RELATION_PARENT_OF,
    RELATION_PART_OF,
    RELATION_PROVIDES_API,
)
from catalog_filters.domain.model.entity import (
    Entity,
    EntityMetadata,
    EntityRelation,
    EntityStatus,
    EntityStatusItem,
)
from catalog_filters.domain.model.refs import (
    EntityRef,
    EntityRefParseError,
    normalize_entity_ref,
    normalize_entity_refs,
    parse_entity_ref,
    stringify_entity_ref,
)
from catalog_filters.domain.model.relations import get_entity_relations

__all__ = [  # noqa: RUF022
    # entity
    "Entity",
    "EntityMetadata",
    "EntityRelation",
    "EntityStatus",
    "EntityStatusItem",
    # refs
    "EntityRef",
    "EntityRefParseError",
    "normalize_entity_ref",
    "normalize_entity_refs",
    "parse_entity_ref",
    "stringify_entity_ref",
    # relations
    "get_entity_relations",
    # constants
    "ANNOTATION_ORPHAN",
    "DEFAULT_API_VERSION",
    "DEFAULT_NAMESPACE",
    "RELATION_API_CONSUMED_BY",
    "RELATION_API_PROVIDED_BY",
    "RELATION_CHILD_OF",
    "RELATION_CONSUMES_API",
    "RELATION_DEPENDENCY_OF",
    "RELATION_DEPENDS_ON",
    "RELATION_HAS_MEMBER",
    "RELATION_HAS_PART",
    "RELATION_MEMBER_OF",
    "RELATION_OWNED_BY",
    "RELATION_OWNER_OF",
    "RELATION_PARENT_OF",
    "RELATION_PART_OF",
    "RELATION_PROVIDES_API",
]
