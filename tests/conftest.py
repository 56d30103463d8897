"""Shared fixtures for the calculator tests."""

import logging

import pytest

from scicalc.app.session import CalculatorSession
from scicalc.config.logging_setup import LOGGER_NAME
from scicalc.config.settings import CalculatorConfig
from scicalc.core.calculator import CalculatorEngine
from scicalc.core.tokens import from_function_name


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def engine(config):
    """Fresh engine in degree mode."""
    return CalculatorEngine(config)


@pytest.fixture
def press(engine):
    """Feed keypad names ("2", "add", "equals", ...) and return the last display."""
    def _press(*names):
        text = engine.display()
        for name in names:
            text = engine.process(from_function_name(name))
        return text
    return _press


@pytest.fixture
def session(engine):
    return CalculatorSession(engine)


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
