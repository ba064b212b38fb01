"""Shared CLI utilities for consistent argument parsing."""

from __future__ import annotations

import argparse
import logging
import sys

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --log-level argument.

    Args:
        parser: ArgumentParser to add the argument to
    """
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging verbosity",
    )


def setup_logging(level: str) -> None:
    """Configure logging on stderr, keeping stdout free for program output.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
