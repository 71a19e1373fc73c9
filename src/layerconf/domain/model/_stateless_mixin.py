"""
Stateless configuration mixin.

This module defines `StatelessConfigMixin`, a helper mixin for configuration
objects whose behavior does not depend on any hyperparameters (for example,
the no-op updater).

It provides trivial JSON serialization and deserialization hooks, allowing
such objects to participate uniformly in configuration export and
reconstruction without introducing special cases.
"""

from typing import Any, Dict
from typing_extensions import Self


class StatelessConfigMixin:
    """
    Mixin providing configuration hooks for hyperparameter-free objects.
    """

    def get_config(self) -> Dict[str, Any]:
        """
        Return an empty configuration dictionary.
        """
        return {}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        """
        Reconstruct the object from a configuration dictionary.

        The provided configuration is ignored and a default instance of the
        class is returned.
        """
        return cls()
