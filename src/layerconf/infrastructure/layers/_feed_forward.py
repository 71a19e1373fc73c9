"""
Shared configuration for feed-forward layer kinds.

`FeedForwardConfig` holds the hyperparameters every feed-forward layer kind
has in common (widths, activation, initialization, updater, dropout,
regularization, constraints, name). Layer kinds embed it by value rather
than inheriting from it.

`FeedForwardLayerBuilder` accumulates those hyperparameters through chained
setters. Setters only record values; validation happens in `build()` of the
concrete builder, which calls `_build_feed_forward()`.
"""

from __future__ import annotations

import dataclasses
import numbers
import operator
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from typing_extensions import Self

from ._activations import Activation
from ._constraints import LayerConstraint
from ._dropout import DropoutPolicy, resolve_dropout
from ..serialization._serialization_core import (
    config_from_dict,
    config_to_dict,
    optional_from_dict,
    optional_to_dict,
)
from ..updaters import Sgd, resolve_updater
from ..utils.weight_initializer import WeightInitializer
from ...domain._errors import InvalidArgumentError
from ...domain._layer import IParamInitializer
from ...domain._updater import IUpdater

_UNSET: Any = object()


@dataclass(frozen=True)
class FeedForwardConfig:
    """
    Immutable hyperparameters shared by feed-forward layers.

    Attributes
    ----------
    n_in : Optional[int]
        Input width. None until set explicitly or by shape inference.
    n_out : Optional[int]
        Output width. Must be set before the layer is used.
    activation : Activation
        Activation applied to the layer output.
    weight_init : str
        Name of a registered weight initializer.
    bias_init : float
        Constant the bias is initialized to.
    updater : IUpdater
        Optimizer configuration.
    dropout : Optional[DropoutPolicy]
        Dropout applied to the layer input during training, if any.
    l1, l2 : float
        Weight regularization coefficients.
    l1_bias, l2_bias : float
        Bias regularization coefficients.
    constraints : Tuple[LayerConstraint, ...]
        Constraints bound to parameter keys.
    layer_name : Optional[str]
        User-assigned layer name.
    """

    n_in: Optional[int] = None
    n_out: Optional[int] = None
    activation: Activation = Activation.SIGMOID
    weight_init: str = "xavier"
    bias_init: float = 0.0
    updater: IUpdater = field(default_factory=Sgd)
    dropout: Optional[DropoutPolicy] = None
    l1: float = 0.0
    l2: float = 0.0
    l1_bias: float = 0.0
    l2_bias: float = 0.0
    constraints: Tuple[LayerConstraint, ...] = ()
    layer_name: Optional[str] = None

    def get_config(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable configuration dictionary.
        """
        return {
            "n_in": self.n_in,
            "n_out": self.n_out,
            "activation": self.activation.value,
            "weight_init": self.weight_init,
            "bias_init": self.bias_init,
            "updater": config_to_dict(self.updater),
            "dropout": optional_to_dict(self.dropout),
            "l1": self.l1,
            "l2": self.l2,
            "l1_bias": self.l1_bias,
            "l2_bias": self.l2_bias,
            "constraints": [config_to_dict(c) for c in self.constraints],
            "layer_name": self.layer_name,
        }

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "FeedForwardConfig":
        """
        Rebuild from a dictionary produced by `get_config`.
        """
        cfg = dict(cfg)
        cfg["activation"] = Activation.resolve(cfg.get("activation", "sigmoid"))
        if "updater" in cfg:
            cfg["updater"] = config_from_dict(cfg["updater"])
        cfg["dropout"] = optional_from_dict(cfg.get("dropout"))
        cfg["constraints"] = tuple(
            config_from_dict(c) for c in cfg.get("constraints", ())
        )
        return cls(**cfg)


def _validate_width(name: str, value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return operator.index(value)


def _validate_coefficient(name: str, value: float) -> float:
    value = float(value)
    if value < 0.0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")
    return value


class FeedForwardLayerBuilder:
    """
    Chained-setter builder for the shared feed-forward hyperparameters.

    Usage
    -----
        builder.n_in(784).n_out(128).activation("relu").updater("adam")

    Notes
    -----
    Setters perform no validation. Concrete builders call
    `_build_feed_forward()` from `build()`, which validates and freezes the
    accumulated values.
    """

    def __init__(self) -> None:
        self._n_in: Optional[int] = None
        self._n_out: Optional[int] = None
        self._activation: Union[str, Activation] = Activation.SIGMOID
        self._weight_init: str = "xavier"
        self._bias_init: float = 0.0
        self._updater: Union[str, IUpdater, Any] = _UNSET
        self._dropout: Union[None, float, DropoutPolicy] = None
        self._l1 = 0.0
        self._l2 = 0.0
        self._l1_bias = 0.0
        self._l2_bias = 0.0
        self._name: Optional[str] = None
        self._all_param_constraints: List[LayerConstraint] = []
        self._weight_constraints: List[LayerConstraint] = []
        self._bias_constraints: List[LayerConstraint] = []

    # ---- widths ----
    def n_in(self, n_in: int) -> Self:
        self._n_in = n_in
        return self

    def n_out(self, n_out: int) -> Self:
        self._n_out = n_out
        return self

    # ---- behavior ----
    def activation(self, activation: Union[str, Activation]) -> Self:
        self._activation = activation
        return self

    def weight_init(self, name: str) -> Self:
        """
        Set the weight initializer by registry name (e.g. "xavier", "kaiming").
        """
        self._weight_init = name
        return self

    def bias_init(self, value: float) -> Self:
        self._bias_init = value
        return self

    def updater(self, updater: Union[str, IUpdater]) -> Self:
        """
        Set the updater, either as an instance or a registered name.
        """
        self._updater = updater
        return self

    def dropout(self, dropout: Union[None, float, DropoutPolicy]) -> Self:
        """
        Set input dropout. A float is the drop probability; 0.0 or None
        disables dropout.
        """
        self._dropout = dropout
        return self

    def name(self, name: str) -> Self:
        self._name = name
        return self

    # ---- regularization ----
    def l1(self, value: float) -> Self:
        self._l1 = value
        return self

    def l2(self, value: float) -> Self:
        self._l2 = value
        return self

    def l1_bias(self, value: float) -> Self:
        self._l1_bias = value
        return self

    def l2_bias(self, value: float) -> Self:
        self._l2_bias = value
        return self

    # ---- constraints ----
    def constrain_all_parameters(self, *constraints: LayerConstraint) -> Self:
        self._all_param_constraints = list(constraints)
        return self

    def constrain_weights(self, *constraints: LayerConstraint) -> Self:
        self._weight_constraints = list(constraints)
        return self

    def constrain_bias(self, *constraints: LayerConstraint) -> Self:
        self._bias_constraints = list(constraints)
        return self

    # ---- freezing ----
    def _build_feed_forward(self) -> FeedForwardConfig:
        """
        Validate accumulated values and return the frozen shared config.

        Constraints are left empty here; they are bound to parameter keys
        by `_normalize_constraints` once the layer kind is known.

        Raises
        ------
        InvalidArgumentError
            If an explicitly given value is out of range or does not resolve.
        """
        if not WeightInitializer.is_registered(self._weight_init):
            available = ", ".join(WeightInitializer.available())
            raise InvalidArgumentError(
                f"Unsupported weight initializer: {self._weight_init!r}. "
                f"Available: {available}"
            )

        updater = Sgd() if self._updater is _UNSET else resolve_updater(self._updater)

        return FeedForwardConfig(
            n_in=_validate_width("n_in", self._n_in),
            n_out=_validate_width("n_out", self._n_out),
            activation=Activation.resolve(self._activation),
            weight_init=self._weight_init,
            bias_init=float(self._bias_init),
            updater=updater,
            dropout=resolve_dropout(self._dropout),
            l1=_validate_coefficient("l1", self._l1),
            l2=_validate_coefficient("l2", self._l2),
            l1_bias=_validate_coefficient("l1_bias", self._l1_bias),
            l2_bias=_validate_coefficient("l2_bias", self._l2_bias),
            layer_name=self._name,
        )

    def _normalize_constraints(
        self, initializer: IParamInitializer, conf: Any
    ) -> Tuple[LayerConstraint, ...]:
        """
        Bind the accumulated constraints to the parameter keys of `conf`.

        - all-parameter constraints -> every parameter key
        - weight constraints -> weight keys
        - bias constraints -> bias keys (skipped when there are none)
        """
        normalized: List[LayerConstraint] = []

        def bind(constraints: Iterable[LayerConstraint], keys: Tuple[str, ...]) -> None:
            for c in constraints:
                normalized.append(c.bind(keys))

        bind(self._all_param_constraints, initializer.param_keys(conf))
        bind(self._weight_constraints, initializer.weight_keys(conf))
        bias_keys = initializer.bias_keys(conf)
        if bias_keys:
            bind(self._bias_constraints, bias_keys)
        return tuple(normalized)


def with_constraints(
    ff: FeedForwardConfig, constraints: Tuple[LayerConstraint, ...]
) -> FeedForwardConfig:
    return dataclasses.replace(ff, constraints=constraints)
