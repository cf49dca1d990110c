from __future__ import annotations

from catalog_filters.domain.model import (
    RELATION_OWNED_BY,
    RELATION_PART_OF,
    EntityRef,
    get_entity_relations,
)
from tests.helpers.entities import make_entity


def test_relations_of_type_keep_listed_order() -> None:
    entity = make_entity(
        relations=(
            ("ownedBy", "group:default/team-b"),
            ("partOf", "system:default/payments"),
            ("ownedBy", "user:default/jdoe"),
        )
    )

    owners = get_entity_relations(entity, RELATION_OWNED_BY)

    assert owners == (
        EntityRef(kind="group", namespace="default", name="team-b"),
        EntityRef(kind="user", namespace="default", name="jdoe"),
    )
    assert [str(owner) for owner in get_entity_relations(entity, RELATION_PART_OF)] == [
        "system:default/payments"
    ]


def test_relation_type_match_is_case_sensitive() -> None:
    entity = make_entity(relations=(("OwnedBy", "group:default/team-a"),))

    assert get_entity_relations(entity, RELATION_OWNED_BY) == ()


def test_relations_filtered_by_kind() -> None:
    entity = make_entity(
        relations=(("ownedBy", "group:default/team-a"), ("ownedBy", "user:default/jdoe"))
    )

    users = get_entity_relations(entity, RELATION_OWNED_BY, kind="User")

    assert [str(user) for user in users] == ["user:default/jdoe"]


def test_missing_relations_behave_as_empty() -> None:
    assert get_entity_relations(make_entity(), RELATION_OWNED_BY) == ()


def test_unparsable_targets_are_skipped() -> None:
    entity = make_entity(
        relations=(("ownedBy", "not a ref!"), ("ownedBy", "group:default/team-a"))
    )

    assert [str(owner) for owner in get_entity_relations(entity, RELATION_OWNED_BY)] == [
        "group:default/team-a"
    ]
