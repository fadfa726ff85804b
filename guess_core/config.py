from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_BOUND = 100
# Largest accepted bound (unsigned 32-bit range).
MAX_BOUND = 2 ** 32 - 1


def env_flag(name: str, default: str = "0") -> bool:
    """Reads a boolean flag such as GUESS_DEBUG=1 from the environment."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def default_bound() -> int:
    """Resolves the bound for new games, falling back to 100 on bad input."""
    raw = os.getenv("GUESS_DEFAULT_BOUND")
    if not raw:
        return DEFAULT_BOUND
    try:
        value = int(raw.strip())
    except ValueError:
        value = 0
    if not 1 <= value <= MAX_BOUND:
        logger.warning("ignoring GUESS_DEFAULT_BOUND=%r; using %d", raw, DEFAULT_BOUND)
        return DEFAULT_BOUND
    return value


def log_level() -> int:
    return logging.DEBUG if env_flag("GUESS_DEBUG") else logging.INFO
