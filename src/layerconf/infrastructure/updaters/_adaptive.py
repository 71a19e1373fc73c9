"""
Per-parameter adaptive learning-rate updaters (AdaGrad, RMSProp, AdaDelta).

Each of these keeps running statistics of past gradients:

- AdaGrad: sum of squared gradients (1 scalar per parameter).
- RMSProp: decaying average of squared gradients (1 scalar per parameter).
- AdaDelta: decaying averages of squared gradients and squared updates
  (2 scalars per parameter).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ._base import (
    StateSizeMixin,
    UpdaterRegistry,
    _require_positive,
    _require_unit_interval,
)
from ..serialization._serialization_core import register_config


@register_config()
@UpdaterRegistry.register_updater("adagrad")
@dataclass(frozen=True)
class AdaGrad(StateSizeMixin):
    """
    AdaGrad updater.

        G_t = G_{t-1} + g_t ** 2
        p  <- p - learning_rate * g_t / (sqrt(G_t) + epsilon)
    """

    STATE_MULTIPLIER: ClassVar[int] = 1

    learning_rate: float = 0.1
    epsilon: float = 1e-6

    def __post_init__(self) -> None:
        _require_positive("learning_rate", self.learning_rate)
        _require_positive("epsilon", self.epsilon)


@register_config()
@UpdaterRegistry.register_updater("rmsprop")
@dataclass(frozen=True)
class RmsProp(StateSizeMixin):
    """
    RMSProp updater.

        E_t = rms_decay * E_{t-1} + (1 - rms_decay) * g_t ** 2
        p  <- p - learning_rate * g_t / (sqrt(E_t) + epsilon)
    """

    STATE_MULTIPLIER: ClassVar[int] = 1

    learning_rate: float = 0.1
    rms_decay: float = 0.95
    epsilon: float = 1e-8

    def __post_init__(self) -> None:
        _require_positive("learning_rate", self.learning_rate)
        _require_unit_interval("rms_decay", self.rms_decay)
        _require_positive("epsilon", self.epsilon)


@register_config()
@UpdaterRegistry.register_updater("adadelta")
@dataclass(frozen=True)
class AdaDelta(StateSizeMixin):
    """
    AdaDelta updater. Has no learning rate; step sizes come from the ratio of
    the two running averages.
    """

    STATE_MULTIPLIER: ClassVar[int] = 2

    rho: float = 0.95
    epsilon: float = 1e-6

    def __post_init__(self) -> None:
        _require_unit_interval("rho", self.rho)
        _require_positive("epsilon", self.epsilon)
