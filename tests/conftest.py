import logging

import pytest

from matrixcache.logging_config import CACHE_CELL_LOGGER, PACKAGE_LOGGER


@pytest.fixture
def package_logger():
    """Restore the package loggers after `setup_logging` has changed them."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    cache_logger = logging.getLogger(CACHE_CELL_LOGGER)
    handlers, level, cache_level = logger.handlers[:], logger.level, cache_logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    cache_logger.setLevel(cache_level)
