"""Logging helpers shared by the loader, engine and CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

_CONFIGURED = False


def get_logger(name: str = 'fx_forward') -> logging.Logger:
    """Return a named logger, configuring the root handler on first use."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        _CONFIGURED = True
    return logging.getLogger(name)


def set_level(level: int | str) -> None:
    """Adjust the package log level (used by the CLI `--verbose` flag)."""
    get_logger('fx_forward').setLevel(level)
