from __future__ import annotations

"""
Logging Configuration Model.

Describes how the shell and the CLI bootstrap the logging subsystem and
maps textual severity names to their numeric constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for configure_logging.

    Attributes:
        level: Minimum severity name to capture.
        console: Emit records on stderr.
        log_file: Optional path of a rotating diagnostic log.
        max_bytes: Size of a log segment before rollover.
        backup_count: Number of rolled segments kept.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file.
        datefmt: Timestamp layout in the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
