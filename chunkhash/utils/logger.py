"""Logging configuration for chunkhash."""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _rotate_log_file(log_file: str, max_files: int) -> None:
    """Give each hashing run a fresh LOG_FILE.

    Diagnostics from the previous run (seek or read failures with their
    offsets) are kept as ``{stem}-{mtime_timestamp}{suffix}``, named after the
    time that run last wrote. Only the newest *max_files* of those are
    retained; LOG_MAX_FILES=0 retains all of them.
    """
    path = Path(log_file)
    if not path.exists() or path.stat().st_size == 0:
        return

    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    rotated = path.with_name(f"{path.stem}-{mtime.strftime('%Y%m%d-%H%M%S')}{path.suffix}")
    path.rename(rotated)

    if max_files <= 0:
        return

    rotated_files = sorted(path.parent.glob(f"{path.stem}-*{path.suffix}"))
    for stale in rotated_files[:-max_files]:
        stale.unlink()


def setup_logger(
    log_level: str = "WARNING",
    log_file: str | None = None,
    max_files: int = 5,
) -> logging.Logger:
    """
    Configure the root logger for a run.

    Console diagnostics go to stderr so stdout only carries the chunk report.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        max_files: Max rotated log files to keep (0 = keep all)

    Returns:
        The root logger
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _rotate_log_file(log_file, max_files)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger
