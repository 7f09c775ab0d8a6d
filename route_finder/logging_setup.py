"""Logging bootstrap for command-line runs."""

from __future__ import annotations

import logging

from .config import ObservabilityConfig


def configure_logging(config: ObservabilityConfig) -> None:
    """Configure the root logger from the observability settings.

    Unknown level names fall back to WARNING.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(level=level, format=config.format)
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"level": logging.getLevelName(level)}
    )
