"""
Usage Walk-through
==================
Demonstrates the cache on two small matrices.

Usage:
    $ python -m matrixcache
"""
import logging

import numpy as np

from matrixcache.cache_cell import CacheCell
from matrixcache.logging_config import setup_logging
from matrixcache.solve import cached_inverse

logger = logging.getLogger(__name__)


def main(verbose: bool = False) -> None:
    """
    Main entry point of the walk-through.

    Args:
        verbose: Also show when the cell stores or drops an inverse.
    """
    setup_logging(level=logging.INFO, cache_level=logging.DEBUG if verbose else None)

    x = np.array([[1.0, 3.0], [2.0, 4.0]])
    cell = CacheCell(x)

    logger.info(f"Inverse (computed):\n{cached_inverse(cell)}")
    logger.info(f"Inverse (cached):\n{cached_inverse(cell)}")

    # A new matrix is not picked up until it is set on the cell
    y = np.array([[4.0, 3.0], [1.0, 1.0]])
    logger.info(f"Inverse of the old matrix, still cached:\n{cached_inverse(cell)}")

    cell.set(y)
    logger.info(f"Inverse of the new matrix:\n{cached_inverse(cell)}")


if __name__ == "__main__":
    main()
