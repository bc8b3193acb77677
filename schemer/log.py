"""Logging setup for Schemer.

Modules log through `logging.getLogger(__name__)`; applications embedding the
interpreter call `configure()` once to get a stderr handler whose level comes
from the LOGLEVEL environment variable.
"""

from __future__ import annotations

import logging

from schemer.config import loglevel_from_env

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure(level: int | None = None) -> None:
    """Install a basic handler on the root logger."""
    logging.basicConfig(
        level=level if level is not None else loglevel_from_env(),
        format=LOG_FORMAT,
    )
