"""Package-wide logging setup for pennant.

Every module obtains its logger through :func:`get_logger`; all of them hang
off the single ``pennant`` logger, which owns the only handler. The initial
level can be taken from the ``PENNANT_LOG_LEVEL`` environment variable
(``DEBUG``, ``INFO``, ``WARNING``...), otherwise it is ``WARNING`` so that a
library consumer sees nothing unless something goes wrong.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pennant"
LOG_LEVEL_ENV = "PENNANT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single pennant handler to the root package logger.

    Only the first call has an effect; use :func:`reset_logging` to start over.

    Args:
        level: Logging level. Defaults to ``PENNANT_LOG_LEVEL`` or WARNING.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_level_from_env(logging.WARNING) if level is None else level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # pytest's caplog hooks the stdlib root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``pennant`` hierarchy.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger that inherits level and handler from the package logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Turn on DEBUG output, e.g. to trace augmentations and cache hits."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to WARNING."""
    set_global_log_level(logging.WARNING)


def reset_logging() -> None:
    """Drop the package handler and forget the configuration (for tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
