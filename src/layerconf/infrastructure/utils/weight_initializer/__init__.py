"""
Weight initialization public API.

This module aggregates and exposes all supported weight initialization
strategies, including constant, Xavier (Glorot), Kaiming (He) and LeCun
initializers, and registers them into the global `WeightInitializer`
registry via import side effects.

Importing this module ensures that all built-in initializers are available
for lookup and dispatch through `WeightInitializer`.

Notes
-----
- Individual initializer implementations are defined in submodules and
  registered at import time.
- Only the dispatcher class is re-exported; concrete initializer functions
  are accessed indirectly via registry names.
"""

from ._constants import *
from ._xavier import *
from ._kaiming import *
from ._lecun import *
from ._base import WeightInitializer

__all__ = [
    WeightInitializer.__name__,
]
