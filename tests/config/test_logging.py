"""Tests for structlog configuration."""

from __future__ import annotations

import logging

import pytest
import structlog

from core.log import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("adapters", "core", "cli"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()


def test_verbose_enables_debug_for_app_loggers() -> None:
    configure_logging(verbose=True)

    assert logging.getLogger("adapters").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert len(logging.getLogger().handlers) == 1


def test_json_renderer() -> None:
    configure_logging(log_json=True)

    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.getLogger("core").level == logging.WARNING
