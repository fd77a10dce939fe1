"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

from benangmerah_driver.events.models import VERBOSE

logging.addLevelName(VERBOSE, "VERBOSE")


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger with a readable format on stderr."""
    name = level.upper()
    numeric = VERBOSE if name == "VERBOSE" else getattr(logging, name, logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
