"""
Default parameter initializer for feed-forward layers.

`DefaultParamInitializer` knows the parameter layout of a dense
(fully-connected) layer and carves a caller-owned flat buffer into named
views:

    buffer: [ weight (n_in * n_out) | bias (n_out, only if has_bias) | ... ]

- ``"weight"`` is a ``(n_in, n_out)`` view over the first
  ``n_in * n_out`` elements.
- ``"bias"`` is a ``(n_out,)`` view over the next ``n_out`` elements.

Views alias the buffer; nothing is copied. Elements past `num_params` are
never read or written.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

import numpy as np

from ...domain._errors import BufferTooSmallError, InvalidArgumentError
from ..utils.weight_initializer import WeightInitializer

logger = logging.getLogger(__name__)

WEIGHT_KEY = "weight"
BIAS_KEY = "bias"


class DefaultParamInitializer:
    """
    Parameter initializer for layers with a weight matrix and optional bias.

    The initializer is stateless; use `get_instance()` to obtain the shared
    instance.

    Notes
    -----
    Configurations passed in must expose `n_in`, `n_out`, `has_bias`,
    `weight_init` and `bias_init`. Widths are assumed to have been
    validated by the caller.
    """

    _INSTANCE: "DefaultParamInitializer | None" = None

    @classmethod
    def get_instance(cls) -> "DefaultParamInitializer":
        if cls._INSTANCE is None:
            cls._INSTANCE = cls()
        return cls._INSTANCE

    def num_params(self, conf: Any) -> int:
        """
        Return ``n_in * n_out + (n_out if has_bias else 0)``.
        """
        n_in, n_out = int(conf.n_in), int(conf.n_out)
        return n_in * n_out + (n_out if conf.has_bias else 0)

    def param_keys(self, conf: Any) -> Tuple[str, ...]:
        return self.weight_keys(conf) + self.bias_keys(conf)

    def weight_keys(self, conf: Any) -> Tuple[str, ...]:
        return (WEIGHT_KEY,)

    def bias_keys(self, conf: Any) -> Tuple[str, ...]:
        return (BIAS_KEY,) if conf.has_bias else ()

    def is_weight_param(self, conf: Any, key: str) -> bool:
        return key in self.weight_keys(conf)

    def is_bias_param(self, conf: Any, key: str) -> bool:
        return key in self.bias_keys(conf)

    def init(
        self, conf: Any, params_view: np.ndarray, initialize_params: bool
    ) -> Dict[str, np.ndarray]:
        """
        Split `params_view` into weight and bias views.

        Parameters
        ----------
        conf : Any
            Dense-style layer configuration.
        params_view : np.ndarray
            Flat (1-D) caller-owned buffer of a floating-point dtype with at least `num_params(conf)`
            elements.
        initialize_params : bool
            If True, the weight view is filled by the configured weight
            initializer and the bias view is set to `bias_init`. If False,
            the buffer contents are left untouched.

        Returns
        -------
        Dict[str, np.ndarray]
            ``{"weight": ..., "bias": ...}`` (no ``"bias"`` entry without a
            bias), in buffer order.

        Raises
        ------
        InvalidArgumentError
            If `params_view` is not a 1-D floating-point NumPy array.
        BufferTooSmallError
            If `params_view` is shorter than `num_params(conf)`.
        """
        if not isinstance(params_view, np.ndarray):
            raise InvalidArgumentError(
                f"params_view must be a numpy.ndarray, got {type(params_view).__name__}"
            )
        if params_view.ndim != 1:
            raise InvalidArgumentError(
                f"params_view must be a flat (1-D) view, got shape {params_view.shape}"
            )
        if not np.issubdtype(params_view.dtype, np.floating):
            raise InvalidArgumentError(
                f"params_view must have a floating-point dtype, got {params_view.dtype}"
            )

        length = self.num_params(conf)
        if params_view.shape[0] < length:
            raise BufferTooSmallError(length, int(params_view.shape[0]))

        n_in, n_out = int(conf.n_in), int(conf.n_out)
        n_weight = n_in * n_out

        # Basic slicing and reshape of a 1-D view never copy.
        weight = params_view[:n_weight].reshape(n_in, n_out)
        params: Dict[str, np.ndarray] = {WEIGHT_KEY: weight}
        if conf.has_bias:
            params[BIAS_KEY] = params_view[n_weight : n_weight + n_out]

        if initialize_params:
            logger.debug(
                "Initializing %d parameters (weight_init=%s, bias_init=%s)",
                length,
                conf.weight_init,
                conf.bias_init,
            )
            WeightInitializer(conf.weight_init)(weight)
            if conf.has_bias:
                params[BIAS_KEY][...] = conf.bias_init

        return params
