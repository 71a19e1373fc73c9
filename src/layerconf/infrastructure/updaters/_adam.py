"""
Adam-family updaters.

This module provides Adam and its common variants. All of them maintain
exponentially decaying averages of past gradients (first moment) and past
squared gradients (second moment); AMSGrad additionally keeps the running
maximum of the second moment.

State per parameter
-------------------
- Adam, AdaMax, Nadam: 2 scalars (m, v).
- AMSGrad: 3 scalars (m, v, v_hat_max).
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


@dataclass(frozen=True)
class _AdamFamily(StateSizeMixin):
    """
    Shared hyperparameters and validation for Adam-style updaters.

    Update rule (Adam)
    ------------------
    Let ``g_t`` be the gradient at step ``t``:

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        v_t = beta2 * v_{t-1} + (1 - beta2) * (g_t ** 2)

        m_hat = m_t / (1 - beta1^t)
        v_hat = v_t / (1 - beta2^t)

        p <- p - learning_rate * m_hat / (sqrt(v_hat) + epsilon)

    Parameters
    ----------
    learning_rate : float, optional
        Must be positive. Defaults to 1e-3.
    beta1, beta2 : float, optional
        Decay rates for the first and second moments, each in (0, 1).
    epsilon : float, optional
        Numerical stability epsilon. Must be positive.
    """

    STATE_MULTIPLIER: ClassVar[int] = 2

    learning_rate: float = 1e-3
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = 1e-8

    def __post_init__(self) -> None:
        _require_positive("learning_rate", self.learning_rate)
        _require_unit_interval("beta1", self.beta1)
        _require_unit_interval("beta2", self.beta2)
        _require_positive("epsilon", self.epsilon)


@register_config()
@UpdaterRegistry.register_updater("adam")
@dataclass(frozen=True)
class Adam(_AdamFamily):
    """
    Adam updater.
    """


@register_config()
@UpdaterRegistry.register_updater("adamax")
@dataclass(frozen=True)
class AdaMax(_AdamFamily):
    """
    AdaMax updater (Adam with an infinity-norm second moment).
    """

    learning_rate: float = 2e-3


@register_config()
@UpdaterRegistry.register_updater("nadam")
@dataclass(frozen=True)
class Nadam(_AdamFamily):
    """
    Nadam updater (Adam with Nesterov momentum).
    """


@register_config()
@UpdaterRegistry.register_updater("amsgrad")
@dataclass(frozen=True)
class AmsGrad(_AdamFamily):
    """
    AMSGrad updater. Keeps the running maximum of ``v_hat`` as extra state.
    """

    STATE_MULTIPLIER: ClassVar[int] = 3
