"""Diagnostic sink configuration used by the command line entry points."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .config import LoggingConfig

STDERR_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def setup_logging(config: LoggingConfig) -> None:
    """Replace loguru's default handler with the configured sinks."""
    logger.remove()
    logger.add(sys.stderr, level=config.level, format=STDERR_FORMAT)
    if config.file is not None:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(config.file, level=config.level, encoding="utf-8")


__all__ = ["setup_logging"]
