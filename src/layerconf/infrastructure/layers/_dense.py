"""
Dense (fully-connected) layer configuration.

This module defines `DenseLayer`, the frozen configuration of a
fully-connected feed-forward layer, and `DenseLayerBuilder`, the only
supported way to create one.

A `DenseLayer` never computes anything itself. It answers three questions
for a network builder:

- how many parameters the layer needs (`num_params`);
- how much memory it will use for a given input type (`memory_report`);
- how to bind the layer to a slice of the network's flat parameter buffer
  (`instantiate`), yielding a `BoundDenseLayer`.

Design Notes
------------
- Shared feed-forward hyperparameters live in an embedded
  `FeedForwardConfig`; `DenseLayer` adds only `has_bias`.
- `n_in` may be left unset and resolved later by `with_inferred_n_in`.
  Once set it is never changed.
- Memory accounting: parameters and updater state are fixed; the layer
  keeps its output activations per example in both phases, plus a copy of
  its input per example while training with dropout. Nothing is cached.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np
from typing_extensions import Self

from ._activations import Activation
from ._bound_dense import BoundDenseLayer
from ._constraints import LayerConstraint
from ._dropout import DropoutPolicy
from ._feed_forward import FeedForwardConfig, FeedForwardLayerBuilder, with_constraints
from ..memory._memory_report import CACHE_MODE_ALL_ZEROS, MemoryReport
from ..params._default import DefaultParamInitializer
from ..serialization._serialization_core import register_config
from ...domain._errors import InvalidArgumentError
from ...domain._input_type import FeedForwardInput, IInputType, RecurrentInput
from ...domain._layer import IIterationListener
from ...domain._updater import IUpdater
from ...domain.utils._validation import (
    assert_n_in_n_out_set,
    assert_n_out_set,
    is_width_set,
)

logger = logging.getLogger(__name__)


@register_config()
@dataclass(frozen=True)
class DenseLayer:
    """
    Frozen configuration of a dense (fully-connected) layer.

    Parameters
    ----------
    feed_forward : FeedForwardConfig
        Shared feed-forward hyperparameters.
    has_bias : bool, optional
        If True, include a learnable bias term. Defaults to True.

    Notes
    -----
    Create instances through `DenseLayer.builder()`; the builder binds
    constraints to parameter keys and validates explicit values.
    """

    feed_forward: FeedForwardConfig = dataclasses.field(default_factory=FeedForwardConfig)
    has_bias: bool = True

    LAYER_TYPE = "DenseLayer"

    @staticmethod
    def builder() -> "DenseLayerBuilder":
        return DenseLayerBuilder()

    # ---- shared hyperparameters ----
    @property
    def n_in(self) -> Optional[int]:
        return self.feed_forward.n_in

    @property
    def n_out(self) -> Optional[int]:
        return self.feed_forward.n_out

    @property
    def activation(self) -> Activation:
        return self.feed_forward.activation

    @property
    def weight_init(self) -> str:
        return self.feed_forward.weight_init

    @property
    def bias_init(self) -> float:
        return self.feed_forward.bias_init

    @property
    def updater(self) -> IUpdater:
        return self.feed_forward.updater

    @property
    def dropout(self) -> Optional[DropoutPolicy]:
        return self.feed_forward.dropout

    @property
    def l1(self) -> float:
        return self.feed_forward.l1

    @property
    def l2(self) -> float:
        return self.feed_forward.l2

    @property
    def l1_bias(self) -> float:
        return self.feed_forward.l1_bias

    @property
    def l2_bias(self) -> float:
        return self.feed_forward.l2_bias

    @property
    def constraints(self) -> Tuple[LayerConstraint, ...]:
        return self.feed_forward.constraints

    @property
    def layer_name(self) -> Optional[str]:
        return self.feed_forward.layer_name

    # ---- parameters ----
    def initializer(self) -> DefaultParamInitializer:
        return DefaultParamInitializer.get_instance()

    def num_params(self) -> int:
        """
        Return ``n_in * n_out + (n_out if has_bias else 0)``.

        Raises
        ------
        ConfigurationIncompleteError
            If `n_in` or `n_out` is not set.
        """
        assert_n_in_n_out_set(self.LAYER_TYPE, self.layer_name, -1, self.n_in, self.n_out)
        return self.initializer().num_params(self)

    def l1_by_param(self, param_key: str) -> float:
        """
        Return the L1 coefficient applied to parameter `param_key`.
        """
        return self._regularization_by_param(param_key, self.l1, self.l1_bias)

    def l2_by_param(self, param_key: str) -> float:
        """
        Return the L2 coefficient applied to parameter `param_key`.
        """
        return self._regularization_by_param(param_key, self.l2, self.l2_bias)

    def _regularization_by_param(
        self, param_key: str, weight_value: float, bias_value: float
    ) -> float:
        initializer = self.initializer()
        if initializer.is_weight_param(self, param_key):
            return weight_value
        if initializer.is_bias_param(self, param_key):
            return bias_value
        raise InvalidArgumentError(f"Unknown parameter key for {self.LAYER_TYPE}: {param_key!r}")

    # ---- shape inference ----
    def output_type(self, input_type: IInputType, layer_index: int = -1) -> IInputType:
        """
        Return the output type for `input_type`.

        The output of a dense layer is always a flat vector of width `n_out`,
        whatever the rank of the input.

        Raises
        ------
        InvalidArgumentError
            If `input_type` is None.
        ConfigurationIncompleteError
            If `n_out` is not set.
        """
        if input_type is None:
            raise InvalidArgumentError(
                f"Invalid input for {self.LAYER_TYPE} (idx={layer_index}, "
                f"name={self.layer_name!r}): input type is None"
            )
        assert_n_out_set(self.LAYER_TYPE, self.layer_name, layer_index, self.n_out)
        return FeedForwardInput(self.n_out)

    def with_inferred_n_in(self, input_type: IInputType) -> Self:
        """
        Return this configuration with `n_in` resolved from `input_type`.

        Feed-forward inputs contribute their `size`; recurrent inputs their
        per-step `size`; image inputs their total element count.

        If `n_in` is already set to the same value, `self` is returned. A
        set `n_in` is never replaced.

        Raises
        ------
        InvalidArgumentError
            If `input_type` is None, or `n_in` is already set to a different
            width.
        """
        if input_type is None:
            raise InvalidArgumentError(
                f"Invalid input for {self.LAYER_TYPE} (name={self.layer_name!r}): "
                "input type is None"
            )
        if isinstance(input_type, RecurrentInput):
            inferred = input_type.size
        else:
            inferred = input_type.elements_per_example()

        if is_width_set(self.n_in):
            if self.n_in != inferred:
                raise InvalidArgumentError(
                    f"{self.LAYER_TYPE} {self.layer_name!r} already has n_in={self.n_in}, "
                    f"but the input type implies n_in={inferred}"
                )
            return self

        return dataclasses.replace(
            self, feed_forward=dataclasses.replace(self.feed_forward, n_in=inferred)
        )

    # ---- memory ----
    def memory_report(self, *input_types: IInputType) -> MemoryReport:
        """
        Compute the memory report for a single input type.

        Parameters
        ----------
        *input_types : IInputType
            Exactly one input type.

        Returns
        -------
        MemoryReport
            Element counts for parameters, updater state, and working memory.

        Raises
        ------
        InvalidArgumentError
            If zero or more than one input type is given.
        ConfigurationIncompleteError
            If `n_in` or `n_out` is not set.
        """
        if len(input_types) != 1 or input_types[0] is None:
            raise InvalidArgumentError(f"Expected 1 input type: got {list(input_types)!r}")
        input_type = input_types[0]

        output_type = self.output_type(input_type)

        num_params = self.num_params()
        updater_state_size = int(self.updater.state_size(num_params))

        train_size_fixed = 0
        train_size_variable = 0
        if self.dropout is not None:
            # input is duplicated for the backward pass
            train_size_variable += input_type.elements_per_example()

        # Output-sized activations. Backprop overwrites the pre-activation
        # output in place; the input-sized epsilon is covered by this term.
        activations = output_type.elements_per_example()
        train_size_variable += activations

        report = MemoryReport(
            layer_name=self.layer_name,
            layer_type=self.LAYER_TYPE,
            input_type=input_type,
            output_type=output_type,
            standard_memory_params=num_params,
            standard_memory_updater_state=updater_state_size,
            working_memory_fixed_inference=0,
            working_memory_fixed_training=train_size_fixed,
            working_memory_variable_inference=activations,
            working_memory_variable_training=train_size_variable,
            cache_memory_fixed=CACHE_MODE_ALL_ZEROS,
            cache_memory_variable=CACHE_MODE_ALL_ZEROS,
        )
        logger.debug(
            "Memory report for %s %r: params=%d updater_state=%d "
            "variable(inference=%d, training=%d)",
            self.LAYER_TYPE,
            self.layer_name,
            num_params,
            updater_state_size,
            activations,
            train_size_variable,
        )
        return report

    # ---- binding ----
    def instantiate(
        self,
        params_view: np.ndarray,
        *,
        listeners: Iterable[IIterationListener] = (),
        name: Optional[str] = None,
        layer_index: int = 0,
        num_inputs: int = 1,
        initialize_params: bool = True,
    ) -> BoundDenseLayer:
        """
        Bind this configuration to a caller-owned flat parameter buffer.

        Parameters
        ----------
        params_view : np.ndarray
            Flat buffer of at least `num_params()` elements. The bound layer
            aliases it and never copies, resizes, or frees it.
        listeners : Iterable[IIterationListener], optional
            Training listeners attached to the bound layer.
        name : Optional[str], optional
            Runtime name; defaults to `layer_name`.
        layer_index : int, optional
            Position of the layer within its network.
        num_inputs : int, optional
            Number of inputs feeding the layer, recorded on the bound layer.
        initialize_params : bool, optional
            If True, write initial values into the parameter views. If
            False, the buffer is left untouched.

        Returns
        -------
        BoundDenseLayer
            Runtime layer whose parameters alias `params_view`.

        Raises
        ------
        ConfigurationIncompleteError
            If `n_in` or `n_out` is not set. Checked before the buffer is
            accessed.
        BufferTooSmallError
            If `params_view` has fewer than `num_params()` elements.
        """
        layer_name = name if name is not None else self.layer_name
        assert_n_in_n_out_set(self.LAYER_TYPE, layer_name, layer_index, self.n_in, self.n_out)

        param_table = self.initializer().init(self, params_view, initialize_params)
        num_params = self.initializer().num_params(self)

        logger.debug(
            "Instantiated %s (idx=%d, name=%r) over %d parameters (initialized=%s)",
            self.LAYER_TYPE,
            layer_index,
            layer_name,
            num_params,
            initialize_params,
        )
        return BoundDenseLayer(
            conf=self,
            index=layer_index,
            name=layer_name,
            params_view=params_view[:num_params],
            param_table=param_table,
            listeners=listeners,
            num_inputs=num_inputs,
        )

    # ---- serialization ----
    def get_config(self) -> Dict[str, Any]:
        cfg = self.feed_forward.get_config()
        cfg["has_bias"] = self.has_bias
        return cfg

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "DenseLayer":
        cfg = dict(cfg)
        has_bias = bool(cfg.pop("has_bias", True))
        return cls(feed_forward=FeedForwardConfig.from_config(cfg), has_bias=has_bias)


class DenseLayerBuilder(FeedForwardLayerBuilder):
    """
    Builder for `DenseLayer`.

    Usage
    -----
        conf = (
            DenseLayer.builder()
            .n_in(10)
            .n_out(5)
            .activation("relu")
            .updater("adam")
            .build()
        )

    Each `build()` call returns a new, independent configuration.
    """

    def __init__(self) -> None:
        super().__init__()
        self._has_bias = True

    def has_bias(self, has_bias: bool) -> Self:
        """
        If True (default), include bias parameters in the layer.
        """
        self._has_bias = has_bias
        return self

    def build(self) -> DenseLayer:
        """
        Validate accumulated values and return a frozen `DenseLayer`.

        Raises
        ------
        InvalidArgumentError
            If an explicitly given value is out of range or does not resolve.
            Missing widths are not an error here.
        """
        layer = DenseLayer(feed_forward=self._build_feed_forward(), has_bias=bool(self._has_bias))
        constraints = self._normalize_constraints(layer.initializer(), layer)
        return dataclasses.replace(
            layer, feed_forward=with_constraints(layer.feed_forward, constraints)
        )
