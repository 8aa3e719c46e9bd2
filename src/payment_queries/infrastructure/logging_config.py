from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_queries.infrastructure.config import QuerySettings

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] %(message)s"


def configure_logging(settings: QuerySettings, log_name: str = "payment_queries") -> logging.Logger:
    """Configure root logging from settings and return the package logger.

    Applications call this once at startup; the library itself never
    configures logging on import.
    """
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    logger = logging.getLogger(log_name)
    logger.setLevel(settings.log_level)
    return logger
