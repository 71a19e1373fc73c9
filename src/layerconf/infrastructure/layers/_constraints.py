"""
Parameter constraint descriptors.

Constraints are applied to parameters after each update (by the training
backend). A configuration stores them already bound to the parameter keys
they act on; binding happens when the layer configuration is built.

Constraints
-----------
- `MaxNormConstraint`: rescale so the L2 norm along `dimensions` is at most
  `max_norm`.
- `MinMaxNormConstraint`: rescale so the L2 norm along `dimensions` lies in
  ``[min_norm, max_norm]``; `rate` < 1 moves only part of the way.
- `UnitNormConstraint`: rescale to unit L2 norm along `dimensions`.
- `NonNegativeConstraint`: clip negative values to zero.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Tuple, Union

from typing_extensions import Self

from ..serialization._serialization_core import register_config
from ...domain._errors import InvalidArgumentError


@dataclass(frozen=True)
class _Constraint:
    """
    Shared behavior: the set of parameter keys a constraint is bound to.
    """

    params: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", frozenset(self.params))

    def bind(self, param_keys: Iterable[str]) -> Self:
        """
        Return a copy of this constraint bound to `param_keys`.
        """
        return dataclasses.replace(self, params=frozenset(param_keys))

    def get_config(self) -> Dict[str, Any]:
        cfg = dataclasses.asdict(self)
        cfg["params"] = sorted(self.params)
        if "dimensions" in cfg:
            cfg["dimensions"] = list(cfg["dimensions"])
        return cfg

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        cfg = dict(cfg)
        cfg["params"] = frozenset(cfg.get("params", ()))
        if "dimensions" in cfg:
            cfg["dimensions"] = tuple(cfg["dimensions"])
        return cls(**cfg)


def _normalize_dimensions(dimensions: Any) -> Tuple[int, ...]:
    if isinstance(dimensions, int):
        dimensions = (dimensions,)
    dims = tuple(int(d) for d in dimensions)
    if not dims:
        raise InvalidArgumentError("dimensions must not be empty")
    return dims


@register_config()
@dataclass(frozen=True)
class MaxNormConstraint(_Constraint):
    """
    Constrain the L2 norm along `dimensions` to at most `max_norm`.
    """

    max_norm: float = 1.0
    dimensions: Tuple[int, ...] = (1,)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.max_norm <= 0.0:
            raise InvalidArgumentError(f"max_norm must be > 0, got {self.max_norm}")
        object.__setattr__(self, "dimensions", _normalize_dimensions(self.dimensions))


@register_config()
@dataclass(frozen=True)
class MinMaxNormConstraint(_Constraint):
    """
    Constrain the L2 norm along `dimensions` to ``[min_norm, max_norm]``.
    """

    min_norm: float = 0.0
    max_norm: float = 1.0
    rate: float = 1.0
    dimensions: Tuple[int, ...] = (1,)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.min_norm < 0.0 or self.max_norm <= self.min_norm:
            raise InvalidArgumentError(
                f"require 0 <= min_norm < max_norm, got min_norm={self.min_norm}, "
                f"max_norm={self.max_norm}"
            )
        if not 0.0 < self.rate <= 1.0:
            raise InvalidArgumentError(f"rate must be in (0, 1], got {self.rate}")
        object.__setattr__(self, "dimensions", _normalize_dimensions(self.dimensions))


@register_config()
@dataclass(frozen=True)
class UnitNormConstraint(_Constraint):
    """
    Constrain the L2 norm along `dimensions` to exactly one.
    """

    dimensions: Tuple[int, ...] = (1,)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "dimensions", _normalize_dimensions(self.dimensions))


@register_config()
@dataclass(frozen=True)
class NonNegativeConstraint(_Constraint):
    """
    Constrain all values to be >= 0.
    """


LayerConstraint = Union[
    MaxNormConstraint, MinMaxNormConstraint, UnitNormConstraint, NonNegativeConstraint
]
