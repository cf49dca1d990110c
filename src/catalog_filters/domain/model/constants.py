"""Well-known catalog constants (pure, dependency-light)."""

from __future__ import annotations

from typing import Final

DEFAULT_NAMESPACE: Final[str] = "default"
DEFAULT_API_VERSION: Final[str] = "backstage.io/v1alpha1"

ANNOTATION_ORPHAN: Final[str] = "backstage.io/orphan"

RELATION_OWNED_BY: Final[str] = "ownedBy"
RELATION_OWNER_OF: Final[str] = "ownerOf"
RELATION_PART_OF: Final[str] = "partOf"
RELATION_HAS_PART: Final[str] = "hasPart"
RELATION_MEMBER_OF: Final[str] = "memberOf"
RELATION_HAS_MEMBER: Final[str] = "hasMember"
RELATION_DEPENDS_ON: Final[str] = "dependsOn"
RELATION_DEPENDENCY_OF: Final[str] = "dependencyOf"
RELATION_PROVIDES_API: Final[str] = "providesApi"
RELATION_API_PROVIDED_BY: Final[str] = "apiProvidedBy"
RELATION_CONSUMES_API: Final[str] = "consumesApi"
RELATION_API_CONSUMED_BY: Final[str] = "apiConsumedBy"
RELATION_CHILD_OF: Final[str] = "childOf"
RELATION_PARENT_OF: Final[str] = "parentOf"
