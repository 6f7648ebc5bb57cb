#!/usr/bin/env python3
"""
Logging utilities for artinspect
"""

import logging
import sys
from pathlib import Path

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(name)s - %(message)s"


def setup_logger(
    name: str = "artinspect",
    level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Setup logger with a colored console handler and a file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = colorlog.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            CONSOLE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    )
    logger.addHandler(console_handler)

    # File handler (optional)
    try:
        target_dir = log_dir or Path.home() / ".artinspect" / "logs"
        target_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(target_dir / "artinspect.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    except OSError as exc:
        # Console only
        logger.debug(f"File logging disabled: {exc}")

    return logger


def get_logger(name: str = "artinspect") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
