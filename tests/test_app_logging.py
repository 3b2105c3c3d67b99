"""Tests for logging configuration."""

import logging

from leftover_chef.app_logging import CLIENT_LOGGERS, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("leftover_chef")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level_and_quiets_clients() -> None:
    configure_logging("debug")

    assert logging.getLogger("leftover_chef").level == logging.DEBUG
    for name in CLIENT_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING

    configure_logging()
    assert logging.getLogger("leftover_chef").level == logging.INFO
