#!/usr/bin/env python3
"""
Logging configuration for the docs exporter.

Logs to the console, and optionally to a rotating file.

Usage:
    from clickup_export.logging_config import setup_logging

    logger = setup_logging(
        name="export",
        workspace_id="9012345",
        log_dir="./logs",  # Optional, console only when omitted
    )
    logger.info("Starting export...")
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    name: str,
    workspace_id: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    console: bool = True,
) -> logging.Logger:
    """
    Set up logging to console and, when a directory is given, to a file.

    Args:
        name: Logger name (used in log filename)
        workspace_id: Workspace identifier for log filename (e.g., "9012345")
        log_dir: Directory for log files (default: LOG_DIR env var, else no file)
        level: Logging level (DEBUG for verbose runs, INFO otherwise)
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated log files to keep
        console: Whether to also log to console

    Returns:
        Configured logger instance

    Log files are named: {workspace_id}-{name}.log (e.g., 9012345-export.log)
    """
    if log_dir is None:
        log_dir = os.environ.get("LOG_DIR")

    # Create logger
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Clear any existing handlers (for re-initialization)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        if workspace_id:
            log_filename = f"{workspace_id}-{name}.log"
        else:
            log_filename = f"{name}.log"
        log_file = log_path / log_filename

        # File handler with rotation
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.debug(f"Logging to file: {log_file}")

    return logger


def get_log_dir(default: Optional[str] = None) -> Optional[Path]:
    """
    Get the log directory from environment or default.

    Checks LOG_DIR environment variable first. Returns None when neither
    is set, meaning console-only logging.
    """
    value = os.environ.get("LOG_DIR", default)
    return Path(value) if value else None
