from __future__ import annotations

import logging

from etf_matcher.config.settings import settings


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the package logger.

    Importing the library never configures logging; applications that want
    the client's request log call this once at startup.
    """
    logger = logging.getLogger("etf_matcher")
    logger.setLevel((level or settings.log_level).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
