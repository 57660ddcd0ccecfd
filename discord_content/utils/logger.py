"""Logging configuration."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "discord_content.cli"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route log records to stderr for the command-line entry point.

    Safe to call more than once: the level is updated but only one handler
    is ever installed on the root logger.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        # stdout carries the JSON output
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    # Quiet down discord.py's verbose logging
    logging.getLogger("discord").setLevel(logging.WARNING)
