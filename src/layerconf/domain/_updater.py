"""
Domain-level updater (optimizer) contracts for layerconf.

This module defines the `IUpdater` protocol: the minimal interface an
optimizer configuration must satisfy for static memory planning.

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Applying updates to parameters is outside the scope of this protocol;
  only the size of the per-parameter optimizer state is of interest here.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class IUpdater(Protocol):
    """
    Updater interface contract.

    An updater describes an optimization rule (e.g., SGD, momentum, Adam)
    and knows how many extra scalars it keeps for a given number of
    trainable parameters.

    Required methods
    ----------------
    - `state_size(num_params)` returns the optimizer-state element count.
    - `get_config()` returns a JSON-compatible hyperparameter dictionary.
    """

    def state_size(self, num_params: int) -> int:
        """
        Return the number of optimizer-state scalars for `num_params`
        parameters.

        Parameters
        ----------
        num_params : int
            Number of trainable parameters managed by the updater.

        Returns
        -------
        int
            Non-negative state element count. Typically a small integer
            multiple of `num_params` (0 for stateless rules).
        """
        ...

    def get_config(self) -> Dict[str, Any]:
        """
        Return the updater hyperparameters as a JSON-serializable dictionary.
        """
        ...
