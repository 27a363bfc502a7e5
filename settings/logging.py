"""Loguru setup shared by the sync CLI and the dashboard."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Replace loguru's default sink with a colored console and an optional daily file."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    if not to_file:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "kalkulacka_{time:YYYY-MM-DD}.log",
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="00:00",
        retention=LOG_RETENTION,
        compression="gz",
        encoding="utf-8",
    )
    logger.debug("File logging to {}", log_dir)
    return logger
