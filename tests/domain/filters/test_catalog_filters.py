from __future__ import annotations

import pytest

from catalog_filters.domain.filters import (
    EntityKindFilter,
    EntityLifecycleFilter,
    EntityNamespaceFilter,
    EntityOwnerFilter,
    EntityTagFilter,
    EntityTypeFilter,
)
from tests.helpers.entities import make_entity, owned_by


def test_kind_filter_is_catalog_only() -> None:
    kind_filter = EntityKindFilter("Component")

    assert kind_filter.get_catalog_filters() == {"kind": "Component"}
    assert kind_filter.to_query_value() == "Component"
    assert not hasattr(kind_filter, "filter_entity")


def test_type_filter_normalizes_single_value_to_list() -> None:
    type_filter = EntityTypeFilter("service")

    assert type_filter.get_types() == ["service"]
    assert type_filter.get_catalog_filters() == {"spec.type": ["service"]}
    assert type_filter.to_query_value() == ["service"]
    assert type_filter == EntityTypeFilter.from_query_value(["service"])
    assert type_filter == EntityTypeFilter(("service",))


def test_type_filter_accepts_sequences() -> None:
    type_filter = EntityTypeFilter(["service", "website"])

    assert type_filter.get_catalog_filters() == {"spec.type": ["service", "website"]}
    assert not hasattr(type_filter, "filter_entity")


def test_tag_filter_requires_every_tag() -> None:
    tag_filter = EntityTagFilter(["a", "b"])

    assert tag_filter.filter_entity(make_entity(tags=["a", "b", "c"]))
    assert not tag_filter.filter_entity(make_entity(tags=["a"]))
    assert not tag_filter.filter_entity(make_entity())


def test_tag_filter_outputs() -> None:
    tag_filter = EntityTagFilter(["java", "kafka"])

    assert tag_filter.get_catalog_filters() == {"metadata.tags": ["java", "kafka"]}
    assert tag_filter.to_query_value() == ["java", "kafka"]


def test_tag_filter_returns_copies() -> None:
    tag_filter = EntityTagFilter(["a"])

    tag_filter.to_query_value().append("b")
    query = tag_filter.get_catalog_filters()["metadata.tags"]
    assert isinstance(query, list)
    query.append("c")

    assert tag_filter.values == ("a",)


def test_lifecycle_filter_matches_any_value() -> None:
    lifecycle_filter = EntityLifecycleFilter(["production", "experimental"])

    assert lifecycle_filter.filter_entity(make_entity(spec={"lifecycle": "experimental"}))
    assert not lifecycle_filter.filter_entity(make_entity(spec={"lifecycle": "deprecated"}))
    assert not lifecycle_filter.filter_entity(make_entity())
    assert lifecycle_filter.get_catalog_filters() == {
        "spec.lifecycle": ["production", "experimental"]
    }
    assert lifecycle_filter.to_query_value() == ["production", "experimental"]


def test_namespace_filter_matches_any_value() -> None:
    namespace_filter = EntityNamespaceFilter(["default", "ops"])

    assert namespace_filter.filter_entity(make_entity(namespace="ops"))
    assert not namespace_filter.filter_entity(make_entity(namespace="payments"))
    assert namespace_filter.to_query_value() == ["default", "ops"]


def test_namespace_filter_queries_namespace_field() -> None:
    namespace_filter = EntityNamespaceFilter(["ops"])

    assert namespace_filter.get_catalog_filters() == {"metadata.namespace": ["ops"]}


def test_owner_filter_drops_invalid_references() -> None:
    owner_filter = EntityOwnerFilter(["group:default/team-a", "!!!invalid!!!"])

    assert owner_filter.to_query_value() == ["group:default/team-a"]
    assert owner_filter.get_catalog_filters() == {"relations.ownedBy": ["group:default/team-a"]}


def test_owner_filter_defaults_to_group_kind() -> None:
    owner_filter = EntityOwnerFilter(["team-a", "user:jdoe"])

    assert owner_filter.values == ("group:default/team-a", "user:default/jdoe")


def test_owner_filter_matches_owned_by_relation() -> None:
    owner_filter = EntityOwnerFilter(["team-a"])

    assert owner_filter.filter_entity(make_entity(relations=owned_by("group:default/team-a")))
    assert owner_filter.filter_entity(make_entity(relations=owned_by("Group:Default/Team-A")))
    assert not owner_filter.filter_entity(make_entity(relations=owned_by("group:default/team-b")))
    assert not owner_filter.filter_entity(
        make_entity(relations=(("partOf", "group:default/team-a"),))
    )
    assert not owner_filter.filter_entity(make_entity())


def test_owner_filter_matches_any_of_several_owners() -> None:
    owner_filter = EntityOwnerFilter(["team-a", "team-b"])
    entity = make_entity(relations=owned_by("user:default/jdoe", "group:default/team-b"))

    assert owner_filter.filter_entity(entity)


def test_owner_filter_with_only_invalid_references_matches_nothing() -> None:
    owner_filter = EntityOwnerFilter(["!!!", ""])

    assert owner_filter.values == ()
    assert not owner_filter.filter_entity(make_entity(relations=owned_by("group:default/team-a")))


def test_owner_filter_custom_defaults() -> None:
    owner_filter = EntityOwnerFilter(["jdoe"], default_kind="User", default_namespace="ops")

    assert owner_filter.to_query_value() == ["user:ops/jdoe"]


def test_owner_filter_value_equality() -> None:
    assert EntityOwnerFilter(["team-a"]) == EntityOwnerFilter(["group:default/team-a"])
    assert EntityOwnerFilter(["team-a"]) != EntityOwnerFilter(["team-b"])
    assert hash(EntityOwnerFilter(["team-a"])) == hash(EntityOwnerFilter(["Group:team-a"]))


@pytest.mark.parametrize(
    "entity_filter",
    [
        EntityKindFilter("Component"),
        EntityTypeFilter("service"),
        EntityTypeFilter(["service", "website"]),
        EntityTagFilter(["a", "b"]),
        EntityLifecycleFilter(["production"]),
        EntityNamespaceFilter(["default", "ops"]),
        EntityOwnerFilter(["team-a", "user:default/jdoe"]),
    ],
    ids=lambda entity_filter: type(entity_filter).__name__,
)
def test_query_value_reconstructs_equivalent_filter(entity_filter: object) -> None:
    query_value = entity_filter.to_query_value()  # type: ignore[attr-defined]

    rebuilt = type(entity_filter).from_query_value(query_value)  # type: ignore[attr-defined]

    assert rebuilt == entity_filter


def test_from_query_value_wraps_scalars() -> None:
    assert EntityTagFilter.from_query_value("a").values == ("a",)
    assert EntityOwnerFilter.from_query_value("team-a").values == ("group:default/team-a",)


@pytest.mark.parametrize("query_value", [[], "", [""]])
def test_kind_filter_rejects_empty_query_value(query_value: str | list[str]) -> None:
    with pytest.raises(ValueError, match="non-empty kind"):
        EntityKindFilter.from_query_value(query_value)
