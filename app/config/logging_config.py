from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

from app.config.settings import settings

# Third-party loggers that are too chatty at DEBUG
SILENCED_LIBRARIES = ("aiosqlite", "stripe", "httpx", "httpcore")

# Track if logging has been configured to prevent re-initialization
_configured = False

LOG_DIR = Path("logs")


def _get_log_filename() -> str:
    """Generate a log filename with current date and time."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return f"{timestamp}.log"


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level_name = logger.level(record.levelname).name
        except ValueError:
            level_name = record.levelno

        # Find caller from where the logging call originated
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level_name, record.getMessage()
        )


def configure_logging(level: str | None = None) -> None:
    """
    Configure logging with loguru, redirect standard logging to loguru,
    and silence noisy third-party libraries.
    - level: optional override for the minimum log level; if None the level
      is inferred from settings.ENV ("development" -> DEBUG; else INFO).
    """
    global _configured
    if _configured:
        return

    env = settings.ENV.lower()
    if level is None:
        level = "DEBUG" if env == "development" else "INFO"
    is_production = env == "production"

    logger.remove()

    log_file_path = None
    if settings.LOG_TO_FILE:
        LOG_DIR.mkdir(exist_ok=True)
        log_file_path = LOG_DIR / _get_log_filename()
        file_fmt = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        )
        logger.add(
            log_file_path,
            level=level,
            format=file_fmt,
            enqueue=True,
            backtrace=True,
            diagnose=not is_production,
            encoding="utf-8",
        )

    if is_production:
        # JSON structured logs to stdout
        logger.add(
            sys.stdout,
            level=level,
            serialize=True,
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )
    else:
        fmt = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stdout,
            level=level,
            format=fmt,
            backtrace=True,
            diagnose=True,
            colorize=True,
        )

    stdlib_level = logging.getLevelName(level.upper())

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(stdlib_level)

    # Ensure uvicorn and SQLAlchemy loggers also funnel through loguru
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        lib_logger = logging.getLogger(name)
        lib_logger.handlers = [InterceptHandler()]
        lib_logger.propagate = False

    for lib_name in SILENCED_LIBRARIES:
        noisy_logger = logging.getLogger(lib_name)
        noisy_logger.setLevel(logging.WARNING)

    _configured = True
    logger.info(f"Logging configured: level={level}, environment={env}, log_file={log_file_path}")
