"""
Configuration & Solver Registry
===============================
Central place for the package constants and the external inversion routines.

Exports:
    DEFAULT_SOLVER (str): Name of the routine used when none is given.
    CACHE_HIT_MESSAGE (str): Message logged when a cached inverse is reused.
    SOLVERS (dict): Known inversion routines by name.
    get_solver: Look up a routine by name.
"""
from __future__ import annotations

from typing import Any, Callable

import numpy as np
import scipy as sp

InversionRoutine = Callable[..., Any]

# Global Constants
DEFAULT_SOLVER: str = "scipy"
CACHE_HIT_MESSAGE: str = "getting cached data"

SOLVERS: dict[str, InversionRoutine] = {
    "scipy": sp.linalg.inv,
    "numpy": np.linalg.inv,
}


def get_solver(name: str) -> InversionRoutine:
    """
    Get the inversion routine registered under a name.

    Args:
        name: Registry key, e.g. "scipy" or "numpy".

    Raises:
        ValueError: If no routine is registered under `name`.

    Returns:
        The inversion routine.
    """
    try:
        return SOLVERS[name]
    except KeyError:
        raise ValueError(f"Unknown solver: '{name}'. "
                         f"'name' must be one of {sorted(SOLVERS)}.") from None
