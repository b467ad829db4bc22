"""Logging module."""

import logging
from logging import Logger
from logging.config import dictConfig

from codewords.config import settings as config
from codewords.utils import cast_fn

# debug settings
debug_mode = config.get("DEBUG", False)


def configure(level: str | None = None):
    """Apply the logging configuration, optionally overriding the level."""
    if level is None:
        level = "DEBUG" if debug_mode else config.LOG_LEVEL
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(message)s",
                },
                "verbose": {
                    "format": "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "level": level.upper(),
                    "class": config.LOG_HANDLER_CLASS,
                    "formatter": "default",
                    "show_time": config.LOG_SHOW_TIME,
                    "rich_tracebacks": config.LOG_RICH_TRACEBACKS,
                    "tracebacks_show_locals": config.LOG_TRACEBACKS_SHOW_LOCALS,
                },
                "file": {
                    "level": "DEBUG",
                    "class": "logging.FileHandler",
                    "formatter": "verbose",
                    "filename": config.LOG_FILE,
                    "mode": "w",
                    # only touch the file once something is logged to it
                    "delay": True,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
            "loggers": {
                "codewords": {
                    "level": "DEBUG",
                    "handlers": list(config.LOG_HANDLERS),
                    "propagate": False,
                },
            },
        }
    )


configure()

_logger: Logger | None = None


def get_logger() -> "Logger":
    """Get logger."""
    global _logger

    if _logger:
        return _logger
    _logger = logging.getLogger("codewords")
    return _logger


@cast_fn(logging.debug)
def debug(msg: str, *args, **kwargs):
    """Debug."""
    kwargs.setdefault("stacklevel", 2)
    get_logger().debug(msg, *args, **kwargs)


@cast_fn(logging.info)
def info(msg, *args, **kwargs):
    """Info."""
    kwargs.setdefault("stacklevel", 2)
    get_logger().info(msg, *args, **kwargs)


@cast_fn(logging.warning)
def warning(msg, *args, **kwargs):
    """Warning"""
    kwargs.setdefault("stacklevel", 2)
    get_logger().warning(msg, *args, **kwargs)


@cast_fn(logging.error)
def error(msg, *args, **kwargs):
    """Error"""
    kwargs.setdefault("stacklevel", 2)
    get_logger().error(msg, *args, **kwargs)

