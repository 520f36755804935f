"""Shared fixtures."""
import pytest

from infix_calculator.common.logger import logger


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any handler, level or propagation change made by the command line."""
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
