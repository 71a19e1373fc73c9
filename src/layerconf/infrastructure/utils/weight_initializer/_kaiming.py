"""
Kaiming (He) weight initializers.

This module provides Kaiming (He) initialization strategies and registers them
into the global `WeightInitializer` registry.

Implemented variants
--------------------
- ``kaiming``:
    Kaiming normal initialization using ``std = sqrt(2 / fan_in)``.
- ``kaiming_uniform``:
    Kaiming uniform initialization using
    ``U(-sqrt(6/fan_in), +sqrt(6/fan_in))``.
- ``kaiming_leaky_relu_*``:
    Kaiming normal adjusted for LeakyReLU activations with a given negative
    slope, registered via a helper.

Notes
-----
- Fan-in is computed from the view shape via ``_calculate_fan_in``.
- All initializers write into the provided view in-place and return it.
"""

import math

import numpy as np

from ._base import WeightInitializer
from ....domain.utils._weight_initialization import _calculate_fan_in


@WeightInitializer.register_initializer("kaiming")
def kaiming(view: np.ndarray) -> np.ndarray:
    """
    Apply standard Kaiming (He) normal initialization.

        std = sqrt(2 / fan_in)

    Parameters
    ----------
    view:
        The view to initialize in-place.

    Returns
    -------
    np.ndarray
        The initialized view (same object).
    """
    fan_in = max(1, int(_calculate_fan_in(tuple(view.shape))))
    std = math.sqrt(2.0 / float(fan_in))

    view[...] = np.random.randn(*view.shape).astype(view.dtype, copy=False) * std
    return view


@WeightInitializer.register_initializer("kaiming_uniform")
def kaiming_uniform(view: np.ndarray) -> np.ndarray:
    """
    Apply Kaiming (He) uniform initialization.

        U(-bound, +bound), where bound = sqrt(6 / fan_in)
    """
    fan_in = max(1, int(_calculate_fan_in(tuple(view.shape))))
    bound = math.sqrt(6.0 / float(fan_in))

    view[...] = np.random.uniform(-bound, bound, size=view.shape).astype(
        view.dtype, copy=False
    )
    return view


def register_kaiming_leaky_relu(name: str, *, negative_slope: float) -> None:
    """
    Register a Kaiming initializer configured for LeakyReLU.

    For LeakyReLU with negative slope ``a``, the Kaiming variance becomes:

        std = sqrt(2 / ((1 + a^2) * fan_in))

    Parameters
    ----------
    name:
        Registry key to associate with the initializer.
    negative_slope:
        The LeakyReLU negative slope parameter (``a``).
    """

    @WeightInitializer.register_initializer(name)
    def _init(view: np.ndarray) -> np.ndarray:
        fan_in = max(1, int(_calculate_fan_in(tuple(view.shape))))
        std = math.sqrt(2.0 / ((1.0 + negative_slope * negative_slope) * fan_in))

        view[...] = np.random.randn(*view.shape).astype(view.dtype, copy=False) * std
        return view


register_kaiming_leaky_relu("kaiming_leaky_relu_0.01", negative_slope=0.01)
