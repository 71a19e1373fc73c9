"""
Dropout policy descriptors.

A layer configuration may carry one dropout policy applied to the layer's
*input* during training. These descriptors only record the hyperparameters;
mask sampling belongs to the execution backend.

For memory planning, any configured policy means the layer keeps a
duplicate of its input for the backward pass.

Policies
--------
- `Dropout`: inverted dropout; each element is zeroed with probability `p`
  and the survivors are scaled by ``1 / (1 - p)``.
- `AlphaDropout`: dropout that preserves the self-normalizing property of
  SELU networks.
- `GaussianDropout`: multiplicative noise ``x * N(1, rate / (1 - rate))``.
- `GaussianNoise`: additive noise ``x + N(0, stddev)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..serialization._serialization_core import register_config
from ...domain._errors import InvalidArgumentError


def _require_probability(name: str, value: float) -> None:
    if not 0.0 <= value < 1.0:
        raise InvalidArgumentError(f"{name} must be in [0, 1), got {value}")


@register_config()
@dataclass(frozen=True)
class Dropout:
    """
    Inverted dropout.

    Parameters
    ----------
    p : float, optional
        Probability of dropping (zeroing) an element. Must satisfy
        0.0 <= p < 1.0. Default is 0.5.
    """

    p: float = 0.5

    def __post_init__(self) -> None:
        _require_probability("p", self.p)


@register_config()
@dataclass(frozen=True)
class AlphaDropout:
    """
    Alpha dropout for SELU activations.
    """

    p: float = 0.5

    def __post_init__(self) -> None:
        _require_probability("p", self.p)


@register_config()
@dataclass(frozen=True)
class GaussianDropout:
    """
    Multiplicative Gaussian noise with mean 1.
    """

    rate: float = 0.5

    def __post_init__(self) -> None:
        _require_probability("rate", self.rate)


@register_config()
@dataclass(frozen=True)
class GaussianNoise:
    """
    Additive zero-mean Gaussian noise.
    """

    stddev: float = 0.1

    def __post_init__(self) -> None:
        if self.stddev <= 0.0:
            raise InvalidArgumentError(f"stddev must be > 0, got {self.stddev}")


DropoutPolicy = Union[Dropout, AlphaDropout, GaussianDropout, GaussianNoise]


def resolve_dropout(
    value: Union[None, float, DropoutPolicy]
) -> Optional[DropoutPolicy]:
    """
    Normalize a builder-supplied dropout argument.

    A float is read as the drop probability of a plain `Dropout`; ``0.0``
    and None both mean "no dropout".

    Raises
    ------
    InvalidArgumentError
        If `value` is neither None, a float, nor a dropout policy.
    """
    if value is None:
        return None
    if isinstance(value, (Dropout, AlphaDropout, GaussianDropout, GaussianNoise)):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if float(value) == 0.0:
            return None
        return Dropout(float(value))
    raise InvalidArgumentError(
        f"dropout must be a probability or a dropout policy, got {type(value).__name__}"
    )
