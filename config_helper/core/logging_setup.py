"""
Structured logging setup.

structlog renders every entry as a JSON line and hands it to the stdlib
logging module, so whichever handlers are attached to the root logger
(stderr, the Elasticsearch queue handler) receive the same document.
"""
import logging
import sys
from typing import Optional
import structlog
from config_helper.core import config

# Console handler attached to the root logger, created on first configure
_console_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog and the root stdlib logger.

    Safe to call more than once; the console handler is only added once.

    Args:
        level: Log level name; defaults to settings.log_level
    """
    global _console_handler

    level_name = (level or config.settings.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        _console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(_console_handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """
    Return a logger handle carrying service metadata.

    The handle resolves its configuration on first use, so it can be created
    before configure_logging() runs.
    """
    return structlog.get_logger(
        name,
        service=config.settings.service_name,
        env=config.settings.environment
    )
