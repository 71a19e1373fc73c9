"""
Updater configurations.

Importing this package registers every built-in updater in
`UpdaterRegistry` and in the configuration serialization registry.
"""

from ._base import UpdaterRegistry, resolve_updater
from ._sgd import Sgd, NoOp
from ._momentum import Nesterovs
from ._adaptive import AdaGrad, RmsProp, AdaDelta
from ._adam import Adam, AdaMax, Nadam, AmsGrad

__all__ = [
    UpdaterRegistry.__name__,
    resolve_updater.__name__,
    Sgd.__name__,
    NoOp.__name__,
    Nesterovs.__name__,
    AdaGrad.__name__,
    RmsProp.__name__,
    AdaDelta.__name__,
    Adam.__name__,
    AdaMax.__name__,
    Nadam.__name__,
    AmsGrad.__name__,
]
