"""Logging helpers for the Sudoku profiles service."""

import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def console_level(quiet: bool = False, verbose: int = 0) -> str:
    """Map -q / -v flags to a loguru level name."""
    if quiet:
        return "ERROR"
    if verbose == 1:
        return "INFO"
    if verbose >= 2:
        return "DEBUG"
    return "WARNING"


def configure_logger(
    source: str, quiet: bool = False, verbose: int = 0, logs_dir: Path = Path("logs")
) -> Path:
    """Configure Loguru logging and return the file sink path pattern."""
    # Clear any previously added handlers
    logger.remove()

    level = console_level(quiet=quiet, verbose=verbose)
    logger.add(sink=sys.stderr, level=level, format=LOG_FORMAT)

    # File handler: DEBUG+, rotated daily, keep 7 days, zipped
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{source}_{'{time:YYYYMMDD}'}.log"

    logger.add(
        sink=str(log_path),
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    logger.info(
        f"Logger configured for source '{source}'. "
        f"Sinks: stderr (level={level}+), file (level=DEBUG+) at '{log_path}'."
    )
    return log_path
