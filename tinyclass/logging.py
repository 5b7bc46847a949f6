"""
Unified logging setup for tinyclass.

Every module uses:
    from tinyclass.logging import get_logger
    logger = get_logger(__name__)

Configuration lives in one place (configure_logging). Levels may be given as
numbers or names, so schema files and the CLI share the same parsing
(resolve_level).
"""

import logging
from typing import Optional, TextIO, Union

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

Level = Union[int, str]


def resolve_level(level: Level) -> int:
    """
    Turn a level number or case-insensitive name into a level number.

    Raises:
        ValueError: For a name logging doesn't know
    """
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"unknown log level {level!r}")
    return number


def configure_logging(
    level: Level = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> int:
    """
    Configure root logging handler and return the level that was applied.

    The handler writes to ``stream``, or to whatever ``sys.stderr`` is when
    the handler is created. It is only installed if the root logger has no
    handler yet; later calls just change the level.
    """
    number = resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(number)
    return number


def get_logger(name: str) -> logging.Logger:
    """Module logger; namespaces follow module paths (``tinyclass.core.registry``)."""
    return logging.getLogger(name)
