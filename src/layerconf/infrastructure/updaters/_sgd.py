"""
Stateless updaters: plain SGD and the no-op updater.

Design notes
------------
- Plain SGD applies ``p <- p - lr * g`` and keeps no optimizer state.
- `NoOp` leaves parameters unchanged (frozen layers) and likewise keeps no
  state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ._base import StateSizeMixin, UpdaterRegistry, _require_positive
from ..serialization._serialization_core import register_config
from ...domain.model._stateless_mixin import StatelessConfigMixin


@register_config()
@UpdaterRegistry.register_updater("sgd")
@dataclass(frozen=True)
class Sgd(StateSizeMixin):
    """
    Stochastic Gradient Descent (SGD) updater.

    Update rule
    -----------
        p <- p - learning_rate * g

    Parameters
    ----------
    learning_rate : float, optional
        Learning rate. Must be positive. Defaults to 1e-3.

    Notes
    -----
    - Momentum and Nesterov variants live in `Nesterovs`.
    - Keeps no per-parameter state.
    """

    STATE_MULTIPLIER: ClassVar[int] = 0

    learning_rate: float = 1e-3

    def __post_init__(self) -> None:
        _require_positive("learning_rate", self.learning_rate)


@register_config()
@UpdaterRegistry.register_updater("noop")
@dataclass(frozen=True)
class NoOp(StatelessConfigMixin, StateSizeMixin):
    """
    Updater that never changes parameters.
    """

    STATE_MULTIPLIER: ClassVar[int] = 0
