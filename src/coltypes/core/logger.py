import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV_VAR = "COLTYPES_LOG_LEVEL"
HANDLER_NAME = "coltypes"


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (or the COLTYPES_LOG_LEVEL env var) to a logging level."""
    name = level or os.environ.get(LOG_LEVEL_ENV_VAR) or "INFO"
    return getattr(logging, name.upper(), logging.INFO)


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure root logger and the coltypes-specific logger.

    Root logger stays at INFO to suppress library noise. Only the coltypes
    namespace is set to the requested level.

    Args:
        level: Log level for coltypes logs (DEBUG, INFO, WARNING, ERROR).
               Falls back to COLTYPES_LOG_LEVEL, then INFO.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()
    coltypes_logger = logging.getLogger("coltypes")

    for h in root.handlers:
        if h.get_name() == HANDLER_NAME:
            coltypes_logger.setLevel(resolve_level(level))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.set_name(HANDLER_NAME)
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)

    coltypes_logger.setLevel(resolve_level(level))


def get_logger(name: str = "coltypes", level: Optional[str] = None) -> logging.Logger:
    """
    Get a module-specific logger writing to stdout through the root handler.
    """
    configure_root_logger(level)
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))
    return logger
