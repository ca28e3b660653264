"""Shared logging helpers for zonesync."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "ZONESYNC_LOG_LEVEL"


def _level_from_environment(default: int) -> int:
    raw = os.getenv(LOG_LEVEL_ENV_VAR)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``ZONESYNC_LOG_LEVEL`` (falling back to INFO) and the format is terse
    enough for scheduled runs whose stderr ends up in a job log. Pass ``force=True``
    to reconfigure during tests.
    """

    logging.basicConfig(
        level=level if level is not None else _level_from_environment(logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
