"""
Xavier/Glorot weight initializers.

This module provides Xavier (Glorot) initialization strategies and registers
them into the global `WeightInitializer` registry.

Implemented variants
--------------------
- ``xavier``:
    Xavier normal initialization using ``std = sqrt(2 / (fan_in + fan_out))``.
- ``xavier_uniform``:
    Xavier uniform initialization using
    ``U(-sqrt(6/(fan_in+fan_out)), +sqrt(6/(fan_in+fan_out)))``.
- ``xavier_tanh``:
    Xavier normal with tanh gain (``gain = 5/3``).

Notes
-----
- Fan-in and fan-out are computed from the view shape via
  ``_calculate_fan_in_and_fan_out``.
- Initializers write into the provided view in-place and return it.
"""

import math

import numpy as np

from ._base import WeightInitializer
from ....domain.utils._weight_initialization import _calculate_fan_in_and_fan_out


def _fans(view: np.ndarray) -> tuple[int, int]:
    fan_in, fan_out = _calculate_fan_in_and_fan_out(tuple(view.shape))
    return max(1, int(fan_in)), max(1, int(fan_out))


@WeightInitializer.register_initializer("xavier")
def xavier(view: np.ndarray) -> np.ndarray:
    """
    Apply Xavier (Glorot) normal initialization.

    This initializes weights from a zero-mean normal distribution with
    standard deviation:

        std = sqrt(2 / (fan_in + fan_out))

    Parameters
    ----------
    view:
        The view to initialize in-place.

    Returns
    -------
    np.ndarray
        The initialized view (same object).
    """
    fan_in, fan_out = _fans(view)
    std = math.sqrt(2.0 / float(fan_in + fan_out))

    view[...] = np.random.randn(*view.shape).astype(view.dtype, copy=False) * std
    return view


@WeightInitializer.register_initializer("xavier_uniform")
def xavier_uniform(view: np.ndarray) -> np.ndarray:
    """
    Apply Xavier (Glorot) uniform initialization.

    This initializes weights from a uniform distribution:

        U(-bound, +bound), where bound = sqrt(6 / (fan_in + fan_out))
    """
    fan_in, fan_out = _fans(view)
    bound = math.sqrt(6.0 / float(fan_in + fan_out))

    view[...] = np.random.uniform(-bound, bound, size=view.shape).astype(
        view.dtype, copy=False
    )
    return view


@WeightInitializer.register_initializer("xavier_tanh")
def xavier_tanh(view: np.ndarray) -> np.ndarray:
    """
    Apply Xavier normal initialization with tanh gain.

        gain = 5/3
        std = gain * sqrt(2 / (fan_in + fan_out))
    """
    fan_in, fan_out = _fans(view)
    gain = 5.0 / 3.0
    std = gain * math.sqrt(2.0 / float(fan_in + fan_out))

    view[...] = np.random.randn(*view.shape).astype(view.dtype, copy=False) * std
    return view
