"""Tests for vidcoach.logging module."""

from __future__ import annotations

import logging

import pytest

from vidcoach.logging import NOISY_LOGGERS, configure_logging, logger


@pytest.fixture(autouse=True)
def restore_levels():
    names = ("vidcoach", *NOISY_LOGGERS)
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLogging:
    def test_quiet_by_default(self) -> None:
        configure_logging()

        assert logger.level == logging.WARNING
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)

        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_package_logger_name(self) -> None:
        assert logger.name == "vidcoach"
