from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "mediatransform"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Library code stays silent unless the application configures logging.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: str | None, default: int = logging.INFO) -> int:
    if not level:
        return default
    value = getattr(logging, level.upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: str = "INFO") -> None:
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolved)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(resolve_level(level, default=logger.level))
    return logger
