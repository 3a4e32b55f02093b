"""Logging setup for the counter."""

from __future__ import annotations

import logging
import os
import sys

from .config import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

ROOT_LOGGER = "dfx_canister_counter"

_CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger (``dfx_canister_counter.<name>``)."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def resolve_level(level: str | int | None = None) -> int:
    """Turn a level name/number into a logging level.

    Falls back to ``DFX_COUNTER_LOG_LEVEL`` and then WARNING; unknown names
    also map to WARNING.
    """
    if isinstance(level, int):
        return level
    name = (level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger (once)."""
    global _CONFIGURED
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolve_level(level))
    if _CONFIGURED:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    _CONFIGURED = True
    return logger
