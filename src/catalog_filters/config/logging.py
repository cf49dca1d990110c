"""Logging setup for the catalog-filters command line."""

from __future__ import annotations

import logging
import sys
from typing import Final

LOG_LEVEL_NAMES: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_log_level(level: int | str) -> int:
    """Return the numeric level for ``level``, accepting names case-insensitively."""

    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {level!r}")
    return logging.getLevelNamesMapping()[name]


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr so stdout only carries JSON lines.

    ``level`` may be a numeric level or one of :data:`LOG_LEVEL_NAMES`. Pass
    ``force=True`` to replace handlers installed earlier, e.g. in tests.
    """

    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
