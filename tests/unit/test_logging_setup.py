"""Tests for configure_logging()."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fastapi_filter_pipeline.logging_setup import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    log = logging.getLogger(LOGGER_NAME)
    handlers, level = list(log.handlers), log.level
    yield
    log.handlers[:] = handlers
    log.setLevel(level)


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        log = configure_logging("DEBUG")
        assert log.name == LOGGER_NAME
        assert log.level == logging.DEBUG

    def test_idempotent(self) -> None:
        log = configure_logging()
        count = len(log.handlers)
        configure_logging()
        assert len(log.handlers) == count

    def test_still_propagates(self) -> None:
        assert configure_logging().propagate is True
