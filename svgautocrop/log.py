"""Logging setup for scripts and hosts embedding the pass."""

from __future__ import annotations

import logging

from svgautocrop.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging once; returns the numeric level in effect."""
    name = (level or settings.log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("svgautocrop").setLevel(numeric)
    return numeric
