"""Logging setup for applications embedding the detector."""

from __future__ import annotations

import logging

from shapedetect.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging from ``level`` or SHAPEDETECT_LOG_LEVEL.

    Unknown level names fall back to INFO. Returns the numeric level applied.
    """
    name = (level or settings.log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("shapedetect").setLevel(numeric)
    return numeric
