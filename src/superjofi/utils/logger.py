"""Logging helpers.

All modules log through children of the ``superjofi`` logger. The root
package logger gets a single stream handler the first time it is
configured; the level comes from ``SUPERJOFI_LOG_LEVEL`` unless the CLI
overrides it.
"""

import logging
import os
import sys
from typing import Optional


ROOT_LOGGER_NAME = "superjofi"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "WARNING"


def _default_formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT)


def _default_console_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


def _resolve_level(level: Optional[int | str]) -> int:
    if level is None:
        level = os.environ.get("SUPERJOFI_LOG_LEVEL", DEFAULT_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: Optional[int | str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Calling this again only updates the level and points the handler at the
    current stderr; handlers are attached once.

    Args:
        level: Level name or number. Defaults to SUPERJOFI_LOG_LEVEL, then WARNING.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_resolve_level(level))
    handlers = [h for h in root.handlers if getattr(h, "_superjofi", False)]
    if handlers:
        # Follow the current stderr
        for handler in handlers:
            handler.setStream(sys.stderr)
    else:
        handler = _default_console_handler(_default_formatter())
        handler._superjofi = True
        root.addHandler(handler)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are nested under it.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
