"""
Constant weight initializers.

This module defines simple constant-valued weight initializers and registers
them with the global `WeightInitializer` registry.

Provided initializers
---------------------
- ``zeros``:
    Set every element of the view to zero.
- ``ones``:
    Set every element of the view to one.

These initializers are typically used for testing or deterministic setups.
"""

import numpy as np

from ._base import WeightInitializer


@WeightInitializer.register_initializer("zeros")
def zeros(view: np.ndarray) -> np.ndarray:
    """
    Initialize a view with all elements set to zero.

    Parameters
    ----------
    view : np.ndarray
        The view to initialize in-place.

    Returns
    -------
    np.ndarray
        The initialized view (same object).
    """
    view[...] = 0
    return view


@WeightInitializer.register_initializer("ones")
def ones(view: np.ndarray) -> np.ndarray:
    """
    Initialize a view with all elements set to one.
    """
    view[...] = 1
    return view
