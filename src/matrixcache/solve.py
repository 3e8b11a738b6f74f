"""
Cached Inversion
================
Returns the inverse of the matrix held by a `CacheCell`, computing it only
when the cell has nothing cached.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from matrixcache.config import CACHE_HIT_MESSAGE, DEFAULT_SOLVER, InversionRoutine, get_solver

if TYPE_CHECKING:
    import numpy.typing as npt

    from matrixcache.cache_cell import CacheCell

logger = logging.getLogger(__name__)


def cached_inverse(
    cell: CacheCell,
    solver: Optional[Union[str, InversionRoutine]] = None,
    **options: Any,
) -> npt.ArrayLike:
    """
    Return the inverse of the matrix held by `cell`, computing it only once.

    A cached inverse is returned as is. Otherwise the inversion routine is
    called on the current matrix and its result is stored in the cell.
    Errors raised by the routine (singular or non-square matrix) propagate
    and leave the cache empty.

    Args:
        cell: The cell holding the matrix.
        solver: Inversion routine, given by registry name or as a callable.
                Defaults to `DEFAULT_SOLVER`.
        **options: Extra keyword arguments forwarded to the routine.

    Raises:
        ValueError: If `solver` names an unknown routine.

    Returns:
        The inverse matrix.
    """
    inverse = cell.get_derived()
    if inverse is not None:
        logger.info(CACHE_HIT_MESSAGE)
        return inverse

    routine = _resolve_solver(solver)

    data = cell.get()
    logger.debug(f"Computing inverse with {routine!r}.")
    inverse = routine(data, **options)
    cell.set_derived(inverse)
    return inverse


def _resolve_solver(solver: Optional[Union[str, InversionRoutine]]) -> InversionRoutine:
    if solver is None:
        return get_solver(DEFAULT_SOLVER)
    if isinstance(solver, str):
        return get_solver(solver)
    return solver
