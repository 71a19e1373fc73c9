"""
Activation function identifiers.

Layer configurations only record *which* activation a layer applies; the
numerical kernels live with the execution backend. Names are matched
case-insensitively so configurations can be written as plain strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from ...domain._errors import InvalidArgumentError


class Activation(Enum):
    """
    Supported activation functions.
    """

    IDENTITY = "identity"
    RELU = "relu"
    LEAKYRELU = "leakyrelu"
    ELU = "elu"
    SELU = "selu"
    SIGMOID = "sigmoid"
    HARDSIGMOID = "hardsigmoid"
    TANH = "tanh"
    HARDTANH = "hardtanh"
    SOFTMAX = "softmax"
    SOFTPLUS = "softplus"
    SWISH = "swish"

    @classmethod
    def resolve(cls, value: Union[str, "Activation"]) -> "Activation":
        """
        Return `value` as an `Activation`.

        Raises
        ------
        InvalidArgumentError
            If `value` does not name a supported activation.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        available = ", ".join(a.value for a in cls)
        raise InvalidArgumentError(
            f"Unsupported activation: {value!r}. Available: {available}"
        )
