"""
Centralized logging configuration for tritiler.

Each generation run appends to a rotating debug log, headed by the run
parameters. Log file: <data_root>/debug.log (with rotation)

Usage:
    from tritiler.logging_config import setup_logging
    setup_logging(data_root, run_info={"width": 12, "seed": 7})

All tritiler.* loggers will write DEBUG to file, WARNING+ to console.
"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Mapping


# Global configuration
LOG_FILE_NAME = "debug.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
BACKUP_COUNT = 5  # Keep 5 backup files
ROOT_LOGGER_NAME = "tritiler"
RUN_SEPARATOR = "-" * 80

FILE_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-30s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"


def setup_logging(
    data_root: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
    run_info: Mapping[str, object] | None = None,
) -> Path:
    """
    Configure the logging system for a tritiler run.

    Safe to call more than once: handlers from an earlier call are closed
    and replaced. Every call writes a run header to the log file, so runs
    appended to the same debug.log stay easy to tell apart.

    Args:
        data_root: Path to data directory (log file goes here)
        log_level: Level for file logging (default: DEBUG)
        console_level: Level for console output (default: WARNING)
        run_info: Optional run parameters (size, seed, ...) for the header

    Returns:
        Path to the log file
    """
    data_path = Path(data_root)
    data_path.mkdir(parents=True, exist_ok=True)
    log_path = data_path / LOG_FILE_NAME

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(_file_handler(log_path, log_level))
    package_logger.addHandler(_console_handler(console_level))

    log_run_header(package_logger, log_path, run_info or {})
    return log_path


def _file_handler(log_path: Path, level: int) -> logging.Handler:
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    return handler


def log_run_header(
    logger: logging.Logger,
    log_path: Path,
    run_info: Mapping[str, object],
) -> None:
    """Mark the start of a generation run in the log."""
    params = " | ".join(f"{key}={value}" for key, value in run_info.items())
    logger.info(RUN_SEPARATOR)
    logger.info(f"RUN | {datetime.now().isoformat()} | {log_path.absolute()}")
    if params:
        logger.info(f"RUN | {params}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger configured as child of the tritiler logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# Structured Logging Helpers
# =============================================================================


def log_attempt(
    logger: logging.Logger,
    attempt: int,
    max_attempts: int,
    cells: int,
) -> None:
    """Log the start of a generation attempt."""
    logger.debug(f"ATTEMPT {attempt:03d}/{max_attempts:03d} | START | cells={cells}")


def log_contradiction(
    logger: logging.Logger,
    attempt: int,
    coord: str,
    reason: str,
    collapsed: int | None = None,
) -> None:
    """Log a contradiction that ended an attempt."""
    collapsed_str = f" | collapsed={collapsed}" if collapsed is not None else ""
    logger.info(f"ATTEMPT {attempt:03d} | CONTRADICTION | {coord} | {reason}{collapsed_str}")


def log_generation(
    logger: logging.Logger,
    status: str,
    attempts: int,
    cells: int,
    duration_ms: int | None = None,
    details: str | None = None,
) -> None:
    """Log the outcome of a generate() call."""
    duration_str = f" | {duration_ms}ms" if duration_ms is not None else ""
    details_str = f" | {details}" if details else ""
    line = f"GENERATE | {status} | attempts={attempts} | cells={cells}{duration_str}{details_str}"
    if status == "FAILED":
        logger.warning(line)
    else:
        logger.info(line)
