"""
Momentum-based updaters.
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
@UpdaterRegistry.register_updater("nesterovs")
@dataclass(frozen=True)
class Nesterovs(StateSizeMixin):
    """
    SGD with Nesterov momentum.

    Update rule
    -----------
        v_t = momentum * v_{t-1} - learning_rate * g_t
        p  <- p + momentum * v_t - learning_rate * g_t

    Keeps one velocity scalar per parameter.
    """

    STATE_MULTIPLIER: ClassVar[int] = 1

    learning_rate: float = 0.1
    momentum: float = 0.9

    def __post_init__(self) -> None:
        _require_positive("learning_rate", self.learning_rate)
        _require_unit_interval("momentum", self.momentum)
