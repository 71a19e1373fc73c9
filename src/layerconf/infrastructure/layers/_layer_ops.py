"""
Layer-kind agnostic entry points.

A network builder holds configurations of many layer kinds. These helpers
dispatch through the `ILayerConfig` capability interface so the builder does
not need to know which kind it is handling.
"""

from __future__ import annotations

from typing import Any

from ...domain._input_type import IInputType
from ...domain._layer import IBoundLayer, ILayerConfig
from ...domain.types._array import ArrayView


def _require_layer_config(config: Any) -> ILayerConfig:
    if not isinstance(config, ILayerConfig):
        raise TypeError(
            f"Expected a layer configuration implementing ILayerConfig, "
            f"got {type(config).__name__}"
        )
    return config


def num_params(config: ILayerConfig) -> int:
    """Return the number of parameters `config` declares."""
    return _require_layer_config(config).num_params()


def memory_report(config: ILayerConfig, *input_types: IInputType) -> Any:
    """Return `config.memory_report(*input_types)`."""
    return _require_layer_config(config).memory_report(*input_types)


def output_type(
    config: ILayerConfig, input_type: IInputType, layer_index: int = -1
) -> IInputType:
    """Return the output type `config` produces for `input_type`."""
    return _require_layer_config(config).output_type(input_type, layer_index)


def instantiate(config: ILayerConfig, params_view: ArrayView, **kwargs: Any) -> IBoundLayer:
    """
    Bind `config` to `params_view`.

    Keyword arguments (`listeners`, `name`, `layer_index`, `num_inputs`,
    `initialize_params`) are forwarded to `config.instantiate`.
    """
    return _require_layer_config(config).instantiate(params_view, **kwargs)
