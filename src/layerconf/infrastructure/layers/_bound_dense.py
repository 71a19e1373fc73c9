"""
Runtime dense layer bound to a caller-owned parameter buffer.

A `BoundDenseLayer` is what a network builder gets back from
`DenseLayer.instantiate`. It owns no parameter storage: its flat parameter
view and its named weight/bias views all alias the buffer the caller
passed in, so parameter updates made through the network's global buffer
are immediately visible here (and vice versa).

The bound layer must never resize, reallocate, or free that buffer; its
lifetime is the caller's concern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

import numpy as np

from ..params._default import BIAS_KEY, WEIGHT_KEY
from ...domain._errors import InvalidArgumentError
from ...domain._layer import IIterationListener

if TYPE_CHECKING:
    from ._dense import DenseLayer


class BoundDenseLayer:
    """
    Dense layer whose parameters alias an externally owned flat buffer.

    Parameters
    ----------
    conf : DenseLayer
        The frozen configuration this layer was bound from (shared,
        read-only).
    index : int
        Position of the layer within its network.
    name : Optional[str]
        Runtime layer name.
    params_view : np.ndarray
        Flat view of exactly `conf.num_params()` elements.
    param_table : Dict[str, np.ndarray]
        Mapping from parameter role to a view over `params_view`.
    listeners : Iterable[IIterationListener], optional
        Training listeners.
    num_inputs : int, optional
        Number of inputs feeding the layer.
    """

    def __init__(
        self,
        conf: "DenseLayer",
        index: int,
        name: Optional[str],
        params_view: np.ndarray,
        param_table: Dict[str, np.ndarray],
        listeners: Iterable[IIterationListener] = (),
        num_inputs: int = 1,
    ) -> None:
        self.conf = conf
        self._index = int(index)
        self.name = name
        self._params_view = params_view
        self._param_table = dict(param_table)
        self._listeners: Tuple[IIterationListener, ...] = tuple(listeners)
        self.num_inputs = int(num_inputs)

    @property
    def index(self) -> int:
        return self._index

    @property
    def listeners(self) -> Tuple[IIterationListener, ...]:
        return self._listeners

    def set_listeners(self, *listeners: IIterationListener) -> None:
        """
        Replace the attached training listeners.
        """
        self._listeners = tuple(listeners)

    def num_params(self) -> int:
        return int(self._params_view.shape[0])

    def params(self) -> np.ndarray:
        """
        Return the flat parameter view (aliases the caller's buffer).
        """
        return self._params_view

    def param_table(self) -> Dict[str, np.ndarray]:
        """
        Return a new dict of the named parameter views.

        The dict is a copy; the views in it still alias the buffer.
        """
        return dict(self._param_table)

    def get_param(self, key: str) -> np.ndarray:
        """
        Return the view for parameter role `key`.

        Raises
        ------
        InvalidArgumentError
            If the layer has no parameter named `key`.
        """
        try:
            return self._param_table[key]
        except KeyError as e:
            raise InvalidArgumentError(
                f"Unknown parameter key {key!r}; available: {sorted(self._param_table)}"
            ) from e

    @property
    def weight(self) -> np.ndarray:
        return self._param_table[WEIGHT_KEY]

    @property
    def bias(self) -> Optional[np.ndarray]:
        return self._param_table.get(BIAS_KEY)

    @property
    def has_bias(self) -> bool:
        return BIAS_KEY in self._param_table

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(index={self._index}, name={self.name!r}, "
            f"n_in={self.conf.n_in}, n_out={self.conf.n_out}, "
            f"has_bias={self.has_bias}, num_params={self.num_params()})"
        )
