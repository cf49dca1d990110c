"""Entity references: parsing, validation and the canonical string form.

A reference is written ``kind:namespace/name``. Both ``kind`` and ``namespace``
may be omitted and are then filled from caller-supplied defaults. The canonical
form is fully lowercased so that string equality matches catalog equality.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from catalog_filters.domain.model.constants import DEFAULT_NAMESPACE

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

_MAX_PART_LENGTH: Final[int] = 63
_KIND_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_NAMESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+(?:[-_.][A-Za-z0-9]+)*")


class EntityRefParseError(ValueError):
    """Raised when an entity reference cannot be parsed."""


@dataclass(frozen=True, slots=True)
class EntityRef:
    """Structured entity reference; ``str()`` yields the canonical form."""

    kind: str
    namespace: str
    name: str

    def __str__(self) -> str:
        return stringify_entity_ref(self)


def parse_entity_ref(
    ref: str,
    *,
    default_kind: str | None = None,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> EntityRef:
    """Parse ``ref`` into an :class:`EntityRef`.

    Accepted shapes are ``name``, ``namespace/name``, ``kind:name`` and
    ``kind:namespace/name``. Raises :class:`EntityRefParseError` for blank input,
    malformed structure, a missing kind without ``default_kind``, or parts
    containing characters the catalog does not allow.
    """

    if not isinstance(ref, str) or not ref.strip():
        raise EntityRefParseError(f"Entity reference must be a non-empty string, got {ref!r}")

    kind: str | None = default_kind
    rest = ref.strip()
    if ":" in rest:
        kind, rest = rest.split(":", 1)
        if not kind:
            raise EntityRefParseError(f"Entity reference {ref!r} has an empty kind")

    namespace = default_namespace
    if "/" in rest:
        namespace, rest = rest.split("/", 1)
        if not namespace:
            raise EntityRefParseError(f"Entity reference {ref!r} has an empty namespace")

    name = rest
    if not name:
        raise EntityRefParseError(f"Entity reference {ref!r} has an empty name")
    if kind is None:
        raise EntityRefParseError(f"Entity reference {ref!r} had no kind and no default was given")

    _validate_part("kind", kind, _KIND_PATTERN, ref)
    _validate_part("namespace", namespace.lower(), _NAMESPACE_PATTERN, ref)
    _validate_part("name", name, _NAME_PATTERN, ref)
    return EntityRef(kind=kind, namespace=namespace, name=name)


def stringify_entity_ref(ref: EntityRef) -> str:
    return f"{ref.kind.lower()}:{ref.namespace.lower()}/{ref.name.lower()}"


def normalize_entity_ref(
    ref: str,
    default_kind: str,
    *,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """Return the canonical string for ``ref``; raises on unparsable input."""

    parsed = parse_entity_ref(ref, default_kind=default_kind, default_namespace=default_namespace)
    return stringify_entity_ref(parsed)


def normalize_entity_refs(
    refs: Iterable[str],
    default_kind: str,
    *,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> tuple[str, ...]:
    """Normalize every parsable reference and drop the rest.

    One malformed entry never prevents the others from being kept, so this never
    raises for bad references.
    """

    normalized: list[str] = []
    for ref in refs:
        try:
            normalized.append(
                normalize_entity_ref(ref, default_kind, default_namespace=default_namespace)
            )
        except EntityRefParseError as exc:
            log.debug("Dropping invalid entity reference %r: %s", ref, exc)
    return tuple(normalized)


def _validate_part(label: str, value: str, pattern: re.Pattern[str], ref: str) -> None:
    if len(value) > _MAX_PART_LENGTH:
        raise EntityRefParseError(
            f"Entity reference {ref!r} has a {label} longer than {_MAX_PART_LENGTH} characters"
        )
    if not pattern.fullmatch(value):
        raise EntityRefParseError(f"Entity reference {ref!r} has an invalid {label} {value!r}")
