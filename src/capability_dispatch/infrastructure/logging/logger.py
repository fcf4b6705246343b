import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from capability_dispatch.config.schemas.logging_schema import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds module, function and line number to each record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(logging_config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        logging_config: Logging section of the application configuration.
                        If None, defaults are used (INFO to the console).
    Returns:
        Configured structlog logger instance.
    """
    logging_config = logging_config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config.level))

    handlers: List[logging.Handler] = []

    if logging_config.destination in ("file", "both"):
        log_path = os.path.expandvars(logging_config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=logging_config.file.max_size_mb * 1024 * 1024,
            backupCount=logging_config.file.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if logging_config.destination in ("console", "both"):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    if logging_config.destination == "none":
        handlers.append(logging.NullHandler())

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger("capability_dispatch")
    logger.debug(
        "Logging configured",
        log_level=logging_config.level,
        log_destination=logging_config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the stdlib logger ``name``."""
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)
