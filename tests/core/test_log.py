# tests/core/test_log.py
"""
Testes da configuração do logger do pacote.
"""

import logging

import pytest

from persistent_queue.core.config import QueueSettings
from persistent_queue.core.log import PACKAGE_LOGGER_NAME, configure_logging


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    assert logger.handlers == handlers


def test_configure_logging_applies_level(restore_package_logger):
    logger = configure_logging(QueueSettings(log_level="DEBUG"))
    assert logger is restore_package_logger
    assert logger.level == logging.DEBUG


def test_configure_logging_defaults_to_warning(restore_package_logger):
    logger = configure_logging()
    assert logger.level == logging.WARNING


def test_configure_logging_does_not_add_handlers(restore_package_logger):
    before = list(restore_package_logger.handlers)
    configure_logging(QueueSettings(log_level="INFO"))
    assert restore_package_logger.handlers == before


def test_child_loggers_inherit_package_level(restore_package_logger):
    configure_logging(QueueSettings(log_level="ERROR"))
    child = logging.getLogger("persistent_queue.core.queue._impl")
    assert child.getEffectiveLevel() == logging.ERROR
