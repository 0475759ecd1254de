"""Logging setup shared by the CLI and the HTTP application."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger.

    Previously installed handlers are removed so repeated calls (tests, app
    reloads) do not duplicate output.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
