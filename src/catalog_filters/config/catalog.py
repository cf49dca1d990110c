"""Catalog defaults used when building filters and reading entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from catalog_filters.domain.filters import OWNER_DEFAULT_KIND
from catalog_filters.domain.model import DEFAULT_NAMESPACE, EntityRefParseError, parse_entity_ref

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_NAMESPACE_ENV: Final[str] = "CATALOG_DEFAULT_NAMESPACE"
OWNER_DEFAULT_KIND_ENV: Final[str] = "CATALOG_OWNER_DEFAULT_KIND"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    default_namespace: str = DEFAULT_NAMESPACE
    owner_default_kind: str = OWNER_DEFAULT_KIND


def get_catalog_config() -> CatalogConfig:
    namespace = optional_env_var(DEFAULT_NAMESPACE_ENV) or DEFAULT_NAMESPACE
    kind = optional_env_var(OWNER_DEFAULT_KIND_ENV) or OWNER_DEFAULT_KIND
    try:
        # Probe reference built from both values so the catalog's own rules apply.
        parse_entity_ref(f"{kind}:{namespace}/probe")
    except EntityRefParseError as exc:
        raise ConfigurationError(
            f"Invalid catalog defaults: kind={kind!r} namespace={namespace!r}"
        ) from exc
    return CatalogConfig(default_namespace=namespace, owner_default_kind=kind)
