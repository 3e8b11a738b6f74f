"""
Cache Cell
==========
A single-slot cache holding a matrix and (optionally) its inverse.

Replacing the matrix with `set` is the only operation that clears the cached
inverse. Nothing here inspects the payload: shape and invertibility are the
concern of the inversion routine (see `matrixcache.solve`).

Classes:
    CacheCell: Holds the current matrix and its cached inverse.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class CacheCell:
    """
    Holds a matrix together with a lazily computed inverse.
    """

    def __init__(self, value: Optional[npt.ArrayLike] = None) -> None:
        """
        Initialize the cell bound to a matrix, with no inverse cached.

        Args:
            value: The matrix to hold. Defaults to a 1x1 matrix holding NaN,
                   which the default inversion routine rejects.
        """
        if value is None:
            value = np.full((1, 1), np.nan)
        self._value = value
        self._derived: Optional[npt.ArrayLike] = None

    def __repr__(self) -> str:
        """String representation of the cell."""
        shape = getattr(self._value, "shape", None)
        return f"{self.__class__.__name__}(shape={shape}, cached={self.is_cached})"

    def set(self, value: npt.ArrayLike) -> None:
        """
        Replace the matrix and drop the cached inverse.

        Args:
            value: The new matrix. Stored as given, without copying.
        """
        self._value = value
        self._derived = None
        logger.debug("Matrix replaced, cached inverse cleared.")

    def get(self) -> npt.ArrayLike:
        """Return the current matrix."""
        return self._value

    def set_derived(self, derived: npt.ArrayLike) -> None:
        """
        Store the inverse of the current matrix.

        The argument is trusted: it is not checked against the current matrix.
        """
        self._derived = derived
        logger.debug("Inverse stored in cache.")

    def get_derived(self) -> Optional[npt.ArrayLike]:
        """Return the cached inverse, or None if nothing is cached."""
        return self._derived

    @property
    def is_cached(self) -> bool:
        """True if an inverse is currently cached."""
        return self._derived is not None
