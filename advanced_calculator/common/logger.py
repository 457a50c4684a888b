"""Shared logger for the calculator package."""
import logging
import os

LOG_LEVEL_ENV = "ADVANCED_CALCULATOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def resolve_level(name: str) -> int:
    """Map a level name such as ``debug`` to its number, WARNING when it is unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


logger = logging.getLogger("advanced_calculator")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(_handler)

logger.setLevel(resolve_level(os.environ.get(LOG_LEVEL_ENV, "WARNING")))
