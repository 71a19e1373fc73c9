"""
Fan-in scaled initializers.

Provided initializers
---------------------
- ``lecun_normal``:
    Normal distribution with ``std = sqrt(1 / fan_in)``.
- ``uniform``:
    ``U(-1/sqrt(fan_in), +1/sqrt(fan_in))``.
"""

import math

import numpy as np

from ._base import WeightInitializer
from ....domain.utils._weight_initialization import _calculate_fan_in


@WeightInitializer.register_initializer("lecun_normal")
def lecun_normal(view: np.ndarray) -> np.ndarray:
    """
    Apply LeCun normal initialization in-place.
    """
    fan_in = max(1, int(_calculate_fan_in(tuple(view.shape))))
    std = math.sqrt(1.0 / float(fan_in))

    view[...] = np.random.randn(*view.shape).astype(view.dtype, copy=False) * std
    return view


@WeightInitializer.register_initializer("uniform")
def uniform(view: np.ndarray) -> np.ndarray:
    """
    Apply fan-in scaled uniform initialization in-place.
    """
    fan_in = max(1, int(_calculate_fan_in(tuple(view.shape))))
    bound = 1.0 / math.sqrt(float(fan_in))

    view[...] = np.random.uniform(-bound, bound, size=view.shape).astype(
        view.dtype, copy=False
    )
    return view
