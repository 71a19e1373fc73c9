"""
Layer configuration and binding interface definitions.

This module defines the domain-level contracts shared by every layer kind
using structural subtyping via `typing.Protocol`:

- `ILayerConfig`: the capability interface a frozen layer configuration
  exposes to a network builder (parameter counting, memory reporting,
  shape inference, and runtime binding).
- `IParamInitializer`: the collaborator that sizes a layer's parameters and
  carves a flat buffer into named views.
- `IIterationListener`: training callbacks a bound layer carries along.
- `IBoundLayer`: the runtime object produced by binding a configuration to
  a caller-owned parameter buffer.

Any object that implements the required methods is considered valid,
independent of inheritance. Layer kinds are selected when the configuration
is built, not through a class hierarchy.
"""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

from ._input_type import IInputType
from .types._array import ArrayView


@runtime_checkable
class IIterationListener(Protocol):
    """
    Training iteration callback.

    Listeners are handed to a bound layer at build time and are invoked by
    the (external) training loop after each iteration.
    """

    def iteration_done(self, model: Any, iteration: int, epoch: int) -> None:
        """
        Called after an iteration completes.

        Parameters
        ----------
        model : Any
            The model or layer that completed the iteration.
        iteration : int
            Iteration counter.
        epoch : int
            Epoch counter.
        """
        ...


@runtime_checkable
class IParamInitializer(Protocol):
    """
    Parameter sizing and view-allocation contract.

    Notes
    -----
    - `num_params` must not touch any buffer.
    - `init` must return views that alias `params_view`; it writes initial
      values only when `initialize_params` is True.
    """

    def num_params(self, conf: Any) -> int:
        """
        Return the number of scalar parameters `conf` requires.
        """
        ...

    def param_keys(self, conf: Any) -> Tuple[str, ...]:
        """
        Return all parameter role names in buffer order.
        """
        ...

    def weight_keys(self, conf: Any) -> Tuple[str, ...]:
        """
        Return the parameter role names that hold weights.
        """
        ...

    def bias_keys(self, conf: Any) -> Tuple[str, ...]:
        """
        Return the parameter role names that hold biases.
        """
        ...

    def init(
        self, conf: Any, params_view: ArrayView, initialize_params: bool
    ) -> Dict[str, ArrayView]:
        """
        Split `params_view` into named views.

        Parameters
        ----------
        conf : Any
            Layer configuration the views are created for.
        params_view : ArrayView
            Flat caller-owned buffer of at least `num_params(conf)` elements.
        initialize_params : bool
            If True, initial values are written into the views.

        Returns
        -------
        Dict[str, ArrayView]
            Mapping from parameter role to its view.
        """
        ...


@runtime_checkable
class IBoundLayer(Protocol):
    """
    Runtime layer whose parameters alias a caller-owned buffer.
    """

    @property
    def index(self) -> int:
        """
        Position of the layer within its network.
        """
        ...

    def num_params(self) -> int:
        """
        Return the number of scalar parameters held by this layer.
        """
        ...

    def params(self) -> ArrayView:
        """
        Return the flat view over this layer's parameters.
        """
        ...

    def param_table(self) -> Mapping[str, ArrayView]:
        """
        Return the mapping from parameter role to view.
        """
        ...


@runtime_checkable
class ILayerConfig(Protocol):
    """
    Capability interface implemented once per layer kind.

    A network builder only talks to layer configurations through this
    interface: it sizes the global parameter buffer with `num_params`,
    plans memory with `memory_report`, propagates shapes with
    `output_type`, and finally binds each layer with `instantiate`.
    """

    @property
    def layer_name(self) -> Optional[str]:
        """
        User-assigned layer name, if any.
        """
        ...

    def initializer(self) -> IParamInitializer:
        """
        Return the parameter initializer for this layer kind.
        """
        ...

    def num_params(self) -> int:
        """
        Return the number of scalar parameters this configuration declares.
        """
        ...

    def output_type(self, input_type: IInputType, layer_index: int = -1) -> IInputType:
        """
        Return the output type produced for `input_type`.
        """
        ...

    def memory_report(self, *input_types: IInputType) -> object:
        """
        Compute the static memory report for the given input type(s).

        Notes
        -----
        The return type is left as `object` to keep the domain layer free of
        infrastructure imports; implementations return a `MemoryReport`.
        """
        ...

    def instantiate(
        self,
        params_view: ArrayView,
        *,
        listeners: Iterable[IIterationListener] = (),
        name: Optional[str] = None,
        layer_index: int = 0,
        num_inputs: int = 1,
        initialize_params: bool = True,
    ) -> IBoundLayer:
        """
        Bind this configuration to `params_view` and return a runtime layer.
        """
        ...
