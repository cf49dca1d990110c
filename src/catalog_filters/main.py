#!/usr/bin/env python3

# ruff: noqa: T201

"""Inspect catalog entity filters from the command line.

``describe`` prints what each filter sends to the catalog and to the URL;
``check`` evaluates each filter on its own against entities read from a JSON
file. Filters are never merged into a single decision here.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from catalog_filters.adapters.catalog import parse_entities
from catalog_filters.config import (
    LOG_LEVEL_NAMES,
    CatalogConfig,
    ConfigurationError,
    configure_logging,
    get_catalog_config,
)
from catalog_filters.domain.filters import (
    CatalogFilterSource,
    EntityErrorFilter,
    EntityKindFilter,
    EntityLifecycleFilter,
    EntityNamespaceFilter,
    EntityOrphanFilter,
    EntityOwnerFilter,
    EntityPredicate,
    EntityTagFilter,
    EntityTextFilter,
    EntityTypeFilter,
    QueryValueSource,
    UserListFilter,
    capabilities_of,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from catalog_filters.domain.model import Entity

log = logging.getLogger(__name__)


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--kind", help="Entity kind, evaluated by the catalog only")
    parser.add_argument("--type", action="append", dest="types", help="spec.type value")
    parser.add_argument("--tag", action="append", dest="tags", help="Required tag (repeatable)")
    parser.add_argument("--text", help="Free-text search over name, title and tags")
    parser.add_argument("--owner", action="append", dest="owners", help="Owner entity reference")
    parser.add_argument("--lifecycle", action="append", dest="lifecycles", help="spec.lifecycle")
    parser.add_argument("--namespace", action="append", dest="namespaces", help="Namespace")
    parser.add_argument(
        "--orphan",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only orphaned (or, with --no-orphan, non-orphaned) entities",
    )
    parser.add_argument(
        "--error",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only entities with (or, with --no-error, without) processing errors",
    )
    parser.add_argument(
        "--user-list",
        help="User list selection; owned/starred are unknown to this tool and match nothing",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect catalog entity filters")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        help="Logging verbosity (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe = subparsers.add_parser("describe", help="Print catalog filters and query values")
    _add_filter_arguments(describe)

    check = subparsers.add_parser("check", help="Evaluate each filter against entities")
    check.add_argument("entities", type=Path, help="JSON file with an entity list")
    _add_filter_arguments(check)

    return parser.parse_args(list(argv))


def _never(_entity: Entity) -> bool:
    return False


def build_filters(args: argparse.Namespace, config: CatalogConfig) -> list[object]:
    """Build one filter per selected option, in a stable order."""

    filters: list[object] = []
    if args.kind:
        filters.append(EntityKindFilter(args.kind))
    if args.types:
        filters.append(EntityTypeFilter(args.types))
    if args.tags:
        filters.append(EntityTagFilter(args.tags))
    if args.text is not None:
        filters.append(EntityTextFilter(args.text))
    if args.owners:
        owner_filter = EntityOwnerFilter(
            args.owners,
            default_kind=config.owner_default_kind,
            default_namespace=config.default_namespace,
        )
        if len(owner_filter.values) < len(args.owners):
            log.warning(
                "Ignored %d invalid owner reference(s)",
                len(args.owners) - len(owner_filter.values),
            )
        filters.append(owner_filter)
    if args.lifecycles:
        filters.append(EntityLifecycleFilter(args.lifecycles))
    if args.namespaces:
        filters.append(EntityNamespaceFilter(args.namespaces))
    if args.orphan is not None:
        filters.append(EntityOrphanFilter(args.orphan))
    if args.error is not None:
        filters.append(EntityErrorFilter(args.error))
    if args.user_list:
        filters.append(UserListFilter(args.user_list, _never, _never))
    return filters


def describe_filter(entity_filter: object) -> dict[str, object]:
    return {
        "filter": type(entity_filter).__name__,
        "capabilities": sorted(str(capability) for capability in capabilities_of(entity_filter)),
        "catalog_filters": (
            entity_filter.get_catalog_filters()
            if isinstance(entity_filter, CatalogFilterSource)
            else None
        ),
        "query_value": (
            entity_filter.to_query_value() if isinstance(entity_filter, QueryValueSource) else None
        ),
    }


def check_entity(entity: Entity, filters: Sequence[object]) -> dict[str, object]:
    return {
        "entity": str(entity.ref),
        "results": {
            type(entity_filter).__name__: (
                entity_filter.filter_entity(entity)
                if isinstance(entity_filter, EntityPredicate)
                else None
            )
            for entity_filter in filters
        },
    }


def _load_entities(path: Path, config: CatalogConfig) -> list[Entity]:
    with path.open(encoding="utf-8") as handle:
        raw = json.load(handle)
    return parse_entities(raw, default_namespace=config.default_namespace)


def main(argv: Sequence[str] | None = None) -> None:
    parsed_args = _parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(level=parsed_args.log_level)

    try:
        config = get_catalog_config()
        filters = build_filters(parsed_args, config)
        if not filters:
            raise ValueError("Select at least one filter option")  # noqa: TRY301
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "describe":
            for entity_filter in filters:
                print(json.dumps(describe_filter(entity_filter)))
        elif parsed_args.command == "check":
            for entity in _load_entities(parsed_args.entities, config):
                print(json.dumps(check_entity(entity, filters)))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while evaluating filters")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
