"""Public interface for the catalog entity adapter."""

from __future__ import annotations

from .schema import (
    EntityListPayload,
    EntityPayload,
    EntityPayloadInput,
    MetadataPayload,
    RelationPayload,
    StatusItemPayload,
    StatusPayload,
)
from .translator import EntityPayloadError, parse_entities, parse_entity

__all__ = [
    "EntityListPayload",
    "EntityPayload",
    "EntityPayloadError",
    "EntityPayloadInput",
    "MetadataPayload",
    "RelationPayload",
    "StatusItemPayload",
    "StatusPayload",
    "parse_entities",
    "parse_entity",
]
