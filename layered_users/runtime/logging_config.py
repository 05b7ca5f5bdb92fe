"""Loguru configuration shared by the HTTP app and the CLI.

Everything goes through loguru: a colourised console sink, an optional
rotating file sink (plain text or JSON lines), and the stdlib ``logging``
records of uvicorn and SQLAlchemy, which are forwarded by ``InterceptHandler``.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from layered_users.runtime.settings import Settings

_PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# stdlib loggers that are too chatty at INFO
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn.access": logging.CRITICAL,
}

# The request logging middleware already writes one line per request
_DROPPED_LOGGERS = frozenset({"uvicorn.access"})


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.name in _DROPPED_LOGGERS:
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_console_sink(settings: Settings, verbose_errors: bool) -> None:
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=_PLAIN_FORMAT,
        colorize=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )


def _add_file_sink(settings: Settings, verbose_errors: bool) -> None:
    path = Path(settings.log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    as_json = settings.log_format == "json"
    logger.add(
        str(path),
        level=settings.log_level,
        # With serialize=True loguru writes the whole record as JSON and only
        # uses the format for the "text" field
        format="{message}" if as_json else _PLAIN_FORMAT,
        serialize=as_json,
        rotation=f"{settings.log_max_size_mb} MB",
        retention=settings.log_backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )


def _route_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging(settings: Settings) -> None:
    """Reset loguru sinks and route stdlib logging through them.

    Safe to call more than once; each call replaces the previous sinks.
    """
    logger.remove()
    logger.configure(extra={"request_id": "-"})

    # Tracebacks with local variables can leak data; keep them out of production
    verbose_errors = settings.environment != "production"

    _add_console_sink(settings, verbose_errors)
    if settings.log_file:
        _add_file_sink(settings, verbose_errors)
    _route_stdlib_logging()

    logger.debug(
        "Logging configured (level={}, file={}, format={})",
        settings.log_level,
        settings.log_file or "-",
        settings.log_format,
    )
