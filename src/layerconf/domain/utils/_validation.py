"""
Width validation helpers shared by layer configurations.

These helpers centralize the "is this width usable?" checks so that every
layer kind reports a missing `n_in`/`n_out` with the same error type and
message.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional

from .._errors import ConfigurationIncompleteError


def is_width_set(value: Optional[int]) -> bool:
    """
    Return True if `value` is a usable (positive integer) width.

    Any `numbers.Integral` other than bool counts, so numpy integers are
    accepted.
    """
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value > 0
    )


def assert_n_in_set(
    layer_type: str, layer_name: Optional[str], layer_index: int, n_in: Any
) -> None:
    """
    Raise `ConfigurationIncompleteError` unless `n_in` is set.
    """
    if not is_width_set(n_in):
        raise ConfigurationIncompleteError(
            layer_type, layer_name, layer_index, "n_in", n_in
        )


def assert_n_out_set(
    layer_type: str, layer_name: Optional[str], layer_index: int, n_out: Any
) -> None:
    """
    Raise `ConfigurationIncompleteError` unless `n_out` is set.
    """
    if not is_width_set(n_out):
        raise ConfigurationIncompleteError(
            layer_type, layer_name, layer_index, "n_out", n_out
        )


def assert_n_in_n_out_set(
    layer_type: str,
    layer_name: Optional[str],
    layer_index: int,
    n_in: Any,
    n_out: Any,
) -> None:
    """
    Validate that both widths of a feed-forward layer are set.

    Parameters
    ----------
    layer_type : str
        Layer kind name used in the error message.
    layer_name : Optional[str]
        User-assigned layer name, if any.
    layer_index : int
        Position of the layer in its network (-1 if unknown).
    n_in : Any
        Input width to validate.
    n_out : Any
        Output width to validate.

    Raises
    ------
    ConfigurationIncompleteError
        If either width is unset or non-positive. `n_in` is checked first.
    """
    assert_n_in_set(layer_type, layer_name, layer_index, n_in)
    assert_n_out_set(layer_type, layer_name, layer_index, n_out)
