"""Logging configuration for the package logger."""

from __future__ import annotations

import logging

LOGGER_NAME = "fastapi_filter_pipeline"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level."""
    log = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_filter_pipeline", False) for h in log.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._filter_pipeline = True  # type: ignore[attr-defined]
        log.addHandler(handler)
    log.setLevel(level)
    return log
