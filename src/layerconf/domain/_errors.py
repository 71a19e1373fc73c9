"""
Configuration and binding errors for layerconf.

This module defines the error taxonomy raised by layer configurations,
memory-report computation, and runtime parameter binding. All of these
errors signal a caller programming error: they are deterministic, derived
from the inputs alone, and never worth retrying.

The errors are intentionally explicit so that a network builder fails fast
with a message identifying the offending layer, instead of surfacing an
opaque indexing failure deep inside parameter allocation.
"""

from __future__ import annotations

from typing import Optional


class InvalidArgumentError(ValueError):
    """
    Raised when an operation receives an argument it cannot accept.

    Typical causes are a wrong number of input-type descriptors passed to
    `memory_report`, a non-positive dimension in an input type, or an
    unknown parameter key.
    """


class ConfigurationIncompleteError(RuntimeError):
    """
    Raised when a required layer width has not been set.

    Layer configurations may be built with `n_in` unset (to be resolved by
    shape inference), but any consumer that needs the width must fail with
    this error rather than proceed with a partial configuration.

    Attributes
    ----------
    layer_type : str
        Layer kind name (e.g., "DenseLayer").
    layer_name : Optional[str]
        User-assigned layer name, if any.
    layer_index : int
        Position of the layer within its network (-1 if unknown).
    field : str
        Name of the missing field ("n_in" or "n_out").
    value : Optional[int]
        The offending value (None or non-positive).
    """

    def __init__(
        self,
        layer_type: str,
        layer_name: Optional[str],
        layer_index: int,
        field: str,
        value: Optional[int],
    ) -> None:
        """
        Initialize the ConfigurationIncompleteError.

        Parameters
        ----------
        layer_type : str
            Layer kind name.
        layer_name : Optional[str]
            User-assigned layer name, if any.
        layer_index : int
            Position of the layer within its network.
        field : str
            Name of the missing field.
        value : Optional[int]
            The value found for the field.
        """
        super().__init__(
            f"Invalid configuration for layer (idx={layer_index}, "
            f"name={layer_name!r}, type={layer_type}): {field} is not set "
            f"or is <= 0 ({field}={value})"
        )
        self.layer_type = layer_type
        self.layer_name = layer_name
        self.layer_index = layer_index
        self.field = field
        self.value = value


class BufferTooSmallError(ValueError):
    """
    Raised when a caller-supplied parameter buffer is shorter than required.

    Attributes
    ----------
    required : int
        Number of scalar parameters the configuration declares.
    actual : int
        Length of the supplied buffer.
    """

    def __init__(self, required: int, actual: int) -> None:
        """
        Initialize the BufferTooSmallError.

        Parameters
        ----------
        required : int
            Required buffer length.
        actual : int
            Supplied buffer length.
        """
        super().__init__(
            f"Parameter buffer too small: expected at least {required} "
            f"elements, got {actual}."
        )
        self.required = required
        self.actual = actual
