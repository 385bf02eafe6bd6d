from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


ROOT_ID = 0
ROOT_SCALE = 0

# Raw strings, parsed where they are used.
MTGTOOLS_LOG_LEVEL = os.environ.get("MTGTOOLS_LOG_LEVEL")
MTGTOOLS_LAYOUT_SEED = os.environ.get("MTGTOOLS_LAYOUT_SEED")
MTGTOOLS_MAX_NODES_TO_DRAW = os.environ.get("MTGTOOLS_MAX_NODES_TO_DRAW")

DEFAULT_LAYOUT_SEED = 7
DEFAULT_MAX_NODES_TO_DRAW = 600


def env_int(raw: str | None, default: int) -> int:
    """Parse an integer setting, falling back to *default* on a bad value."""
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring non-integer setting %r, using %d", raw, default)
        return default


def log_level(raw: str | None) -> int | None:
    """Return the numeric logging level named by *raw*, or None if unset or unknown."""
    if raw is None or not raw.strip():
        return None
    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    logger.warning("ignoring unknown log level %r", raw)
    return None
