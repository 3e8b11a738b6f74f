"""
Logging Configuration
=====================
Routes the package log records to stdout and, optionally, a file.

The package logs on two channels:
    matrixcache.solve: INFO record on every cache hit.
    matrixcache.cache_cell: DEBUG records when a matrix is replaced or an
        inverse is stored.

The cache-cell channel has its own level so that cache hits can be shown
without the store/invalidation chatter, or the other way round.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "matrixcache"
CACHE_CELL_LOGGER = "matrixcache.cache_cell"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    cache_level: Optional[int] = None,
) -> logging.Logger:
    """
    Configures the 'matrixcache' logger.

    Args:
        level: Level for the package (e.g. logging.INFO shows cache hits).
        log_file: Optional path to save logs to a file.
        cache_level: Level for the cache-cell records. Defaults to `level`.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    cache_logger = logging.getLogger(CACHE_CELL_LOGGER)
    cache_logger.setLevel(logging.NOTSET if cache_level is None else cache_level)

    # Handlers must let through the most verbose of the two channels;
    # the loggers themselves do the filtering.
    handler_level = level if cache_level is None else min(level, cache_level)

    # Calling twice must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s), level={logging.getLevelName(level)}, "
                 f"cache level={logging.getLevelName(cache_logger.getEffectiveLevel())}.")
    return logger
