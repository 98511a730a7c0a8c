"""
FinEdge - Logger Configuration
Centralized logging with loguru
"""
import sys
from pathlib import Path
from loguru import logger

from finedge.config import settings


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging() -> None:
    """
    Configure loguru sinks.

    Console output always; rotating files for all logs and for errors
    unless LOG_TO_FILE is disabled (tests).
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
    )

    if not settings.LOG_TO_FILE:
        return

    log_path = Path(settings.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path / "app.log",
        rotation="10 MB",
        retention="30 days",
        compression="gz",
        format=LOG_FORMAT,
        level="DEBUG",
    )

    logger.add(
        log_path / "error.log",
        rotation="10 MB",
        retention="30 days",
        compression="gz",
        format=LOG_FORMAT,
        level="ERROR",
    )


__all__ = ["logger", "setup_logging"]
