"""Pydantic models describing catalog entity payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog_filters.domain.model import DEFAULT_API_VERSION


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _null_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _null_to_empty_dict(value: object) -> object:
    return {} if value is None else value


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class RelationPayload(CatalogBaseModel):
    type: str
    target_ref: str = Field(alias="targetRef")


class MetadataPayload(CatalogBaseModel):
    name: str
    namespace: str | None = None
    title: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    annotations: dict[str, str] = Field(default_factory=dict)
    labels: dict[str, str] = Field(default_factory=dict)

    _normalize_optional_text = field_validator(
        "namespace", "title", "description", mode="before"
    )(_blank_to_none)
    _normalize_tags = field_validator("tags", mode="before")(_null_to_empty_list)
    _normalize_maps = field_validator("annotations", "labels", mode="before")(_null_to_empty_dict)


class StatusItemPayload(CatalogBaseModel):
    type: str
    level: str = "error"
    message: str | None = None

    _normalize_message = field_validator("message", mode="before")(_blank_to_none)


class StatusPayload(CatalogBaseModel):
    items: list[StatusItemPayload] = Field(default_factory=list)

    _normalize_items = field_validator("items", mode="before")(_null_to_empty_list)


class EntityPayload(CatalogBaseModel):
    api_version: str = Field(default=DEFAULT_API_VERSION, alias="apiVersion")
    kind: str
    metadata: MetadataPayload
    spec: dict[str, Any] = Field(default_factory=dict)
    relations: list[RelationPayload] = Field(default_factory=list)
    status: StatusPayload | None = None

    _normalize_spec = field_validator("spec", mode="before")(_null_to_empty_dict)
    _normalize_relations = field_validator("relations", mode="before")(_null_to_empty_list)


class EntityListPayload(CatalogBaseModel):
    items: list[EntityPayload]


EntityPayloadInput = EntityPayload | Mapping[str, object]
