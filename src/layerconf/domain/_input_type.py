"""
Input-type descriptors.

This module defines the value objects used to describe the shape of a
layer's input (and output) without referring to any concrete array. They
carry only what static resource planning needs: the per-example shape and
the number of scalar elements one example occupies.

Supported kinds
---------------
- `FeedForwardInput`: a flat vector of `size` features.
- `RecurrentInput`: `size` features per step over `time_series_length` steps.
- `ConvolutionalInput`: an image of `channels x height x width`.
- `ConvolutionalFlatInput`: an image that arrives already flattened into a
  row vector of `height * width * depth` features.

All descriptors are frozen dataclasses: cheap to create, compared by value,
and never mutated after construction.
"""

from __future__ import annotations

import numbers
import operator
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ._errors import InvalidArgumentError


def _require_positive(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    value = operator.index(value)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


def _set_positive(obj: Any, *names: str) -> None:
    # numpy integers are stored as plain ints
    for name in names:
        object.__setattr__(obj, name, _require_positive(name, getattr(obj, name)))


@runtime_checkable
class IInputType(Protocol):
    """
    Structural contract for input-type descriptors.

    Any object that reports its per-example element count and a
    JSON-compatible configuration can be used where an input type is
    expected.
    """

    def elements_per_example(self) -> int:
        """
        Return the number of scalar elements in a single example.

        Returns
        -------
        int
            Element count, independent of minibatch size.
        """
        ...

    def get_config(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable description of this input type.
        """
        ...


@dataclass(frozen=True)
class FeedForwardInput:
    """
    Feed-forward (flat vector) input of width `size`.
    """

    size: int

    def __post_init__(self) -> None:
        _set_positive(self, "size")

    def elements_per_example(self) -> int:
        return self.size

    def get_config(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecurrentInput:
    """
    Recurrent (time series) input.

    Parameters
    ----------
    size : int
        Number of features per time step.
    time_series_length : Optional[int]
        Number of time steps, or None when variable/unknown.
    """

    size: int
    time_series_length: Optional[int] = None

    def __post_init__(self) -> None:
        _set_positive(self, "size")
        if self.time_series_length is not None:
            _set_positive(self, "time_series_length")

    def elements_per_example(self) -> int:
        """
        Return `size * time_series_length`.

        Raises
        ------
        InvalidArgumentError
            If the time series length is unknown.
        """
        if self.time_series_length is None:
            raise InvalidArgumentError(
                "Cannot calculate number of elements per example: time series "
                "length is not set. Use InputType.recurrent(size, "
                "time_series_length) instead."
            )
        return self.size * self.time_series_length

    def get_config(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConvolutionalInput:
    """
    Convolutional (image) input of `channels x height x width`.
    """

    height: int
    width: int
    channels: int

    def __post_init__(self) -> None:
        _set_positive(self, "height", "width", "channels")

    def elements_per_example(self) -> int:
        return self.height * self.width * self.channels

    def get_config(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConvolutionalFlatInput:
    """
    Convolutional input that has already been flattened to a row vector.

    Typical for image datasets stored one example per row (e.g. 784 columns
    for 28x28 grayscale digits).
    """

    height: int
    width: int
    depth: int

    def __post_init__(self) -> None:
        _set_positive(self, "height", "width", "depth")

    @property
    def flattened_size(self) -> int:
        return self.height * self.width * self.depth

    def elements_per_example(self) -> int:
        return self.flattened_size

    def get_config(self) -> Dict[str, Any]:
        return asdict(self)


class InputType:
    """
    Factory namespace for input-type descriptors.

    Usage
    -----
        InputType.feed_forward(784)
        InputType.convolutional(28, 28, 1)
        InputType.recurrent(32, 100)
    """

    @staticmethod
    def feed_forward(size: int) -> FeedForwardInput:
        return FeedForwardInput(size)

    @staticmethod
    def recurrent(
        size: int, time_series_length: Optional[int] = None
    ) -> RecurrentInput:
        return RecurrentInput(size, time_series_length)

    @staticmethod
    def convolutional(height: int, width: int, channels: int) -> ConvolutionalInput:
        return ConvolutionalInput(height, width, channels)

    @staticmethod
    def convolutional_flat(
        height: int, width: int, depth: int
    ) -> ConvolutionalFlatInput:
        return ConvolutionalFlatInput(height, width, depth)
