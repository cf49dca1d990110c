"""Translate catalog entity payloads into domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from catalog_filters.domain.model import (
    DEFAULT_NAMESPACE,
    Entity,
    EntityMetadata,
    EntityRelation,
    EntityStatus,
    EntityStatusItem,
)

from .schema import EntityListPayload, EntityPayload, EntityPayloadInput

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import StatusPayload


log = getLogger(__name__)


class EntityPayloadError(ValueError):
    """Raised when a payload does not describe a valid catalog entity."""


def _ensure_entity_payload(payload: EntityPayloadInput) -> EntityPayload:
    if isinstance(payload, EntityPayload):
        return payload
    return EntityPayload.model_validate(payload)


def parse_entity(
    payload: EntityPayloadInput,
    *,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> Entity:
    """Return a domain :class:`Entity` for a single catalog payload.

    Entities without a namespace are placed in ``default_namespace``.
    """

    try:
        entity_payload = _ensure_entity_payload(payload)
    except ValidationError as exc:
        log.exception("Error parsing catalog entity")
        raise EntityPayloadError(
            f"Invalid catalog entity payload: {exc.error_count()} error(s)"
        ) from exc

    metadata = entity_payload.metadata
    return Entity(
        api_version=entity_payload.api_version,
        kind=entity_payload.kind,
        metadata=EntityMetadata(
            name=metadata.name,
            namespace=metadata.namespace or default_namespace,
            title=metadata.title,
            description=metadata.description,
            tags=tuple(metadata.tags),
            annotations=metadata.annotations,
            labels=metadata.labels,
        ),
        spec=entity_payload.spec,
        relations=tuple(
            EntityRelation(type=relation.type, target_ref=relation.target_ref)
            for relation in entity_payload.relations
        ),
        status=_build_status(entity_payload.status),
    )


def parse_entities(
    payloads: Iterable[EntityPayloadInput] | Mapping[str, object],
    *,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> list[Entity]:
    """Parse a list of payloads, or a catalog response object with an ``items`` list."""

    if isinstance(payloads, Mapping):
        try:
            items: Iterable[EntityPayloadInput] = EntityListPayload.model_validate(payloads).items
        except ValidationError as exc:
            log.exception("Error parsing catalog entity list")
            raise EntityPayloadError("Invalid catalog entity list payload") from exc
    else:
        items = cast("Iterable[EntityPayloadInput]", payloads)
    entities = [parse_entity(item, default_namespace=default_namespace) for item in items]
    log.debug("Parsed %d catalog entities", len(entities))
    return entities


def _build_status(status: StatusPayload | None) -> EntityStatus | None:
    if status is None:
        return None
    return EntityStatus(
        items=tuple(
            EntityStatusItem(type=item.type, level=item.level, message=item.message)
            for item in status.items
        )
    )
