"""Logging configuration for the padthai command-line tool."""
from __future__ import annotations

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure stderr logging. stdout carries codec output only."""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
    )

    logging.getLogger("padthai").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"padthai.{name}")
