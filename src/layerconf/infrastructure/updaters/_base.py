"""
Updater registry and shared state-sizing behavior.

Updaters are optimizer *configurations*: they carry hyperparameters and
answer how much optimizer state they keep per trainable parameter. Applying
updates is done elsewhere.

Design
------
- Each updater class declares `STATE_MULTIPLIER`, the number of state
  scalars kept per parameter (0 for plain SGD, 1 for momentum, 2 for Adam).
- Updater classes register themselves under a short name so configurations
  can refer to them by string (e.g. ``"adam"``).

Usage example
-------------
    @UpdaterRegistry.register_updater("adam")
    @dataclass(frozen=True)
    class Adam(StateSizeMixin): ...

    UpdaterRegistry.create("adam")  # -> Adam() with default hyperparameters
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, ClassVar, Dict, Type, TypeVar, Union

from ...domain._errors import InvalidArgumentError
from ...domain._updater import IUpdater

T = TypeVar("T", bound=type)


class StateSizeMixin:
    """
    Mixin implementing `state_size` from a per-class multiplier.

    Subclasses are dataclasses; their fields are the updater hyperparameters
    returned by `get_config`.
    """

    STATE_MULTIPLIER: ClassVar[int] = 0

    def get_config(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)  # type: ignore[call-overload]

    def state_size(self, num_params: int) -> int:
        """
        Return ``STATE_MULTIPLIER * num_params``.

        Raises
        ------
        InvalidArgumentError
            If `num_params` is negative.
        """
        if num_params < 0:
            raise InvalidArgumentError(f"num_params must be >= 0, got {num_params}")
        return self.STATE_MULTIPLIER * int(num_params)


class UpdaterRegistry:
    """
    Name-keyed registry of updater classes.
    """

    UPDATERS: ClassVar[Dict[str, Type[Any]]] = {}

    @classmethod
    def register_updater(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register an updater class under `name`.

        Parameters
        ----------
        name:
            Registry key (case-insensitive).
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Updater name must be a non-empty string")
        key = name.lower()

        def decorator(updater_cls: T) -> T:
            if not overwrite and key in cls.UPDATERS:
                raise ValueError(f"Updater already registered: {key!r}")
            cls.UPDATERS[key] = updater_cls
            return updater_cls

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered updater names (sorted)."""
        return tuple(sorted(cls.UPDATERS))

    @classmethod
    def get(cls, name: str) -> Type[Any]:
        """
        Return the updater class registered under `name`.

        Raises
        ------
        ValueError
            If `name` is not registered.
        """
        try:
            return cls.UPDATERS[name.lower()]
        except KeyError as e:
            available = ", ".join(cls.available()) or "<none>"
            raise ValueError(
                f"Unsupported updater name: {name!r}. Available: {available}"
            ) from e

    @classmethod
    def create(cls, name: str, **hyperparameters: Any) -> IUpdater:
        """Instantiate the updater registered under `name`."""
        return cls.get(name)(**hyperparameters)


def resolve_updater(updater: Union[str, IUpdater]) -> IUpdater:
    """
    Return `updater` as an `IUpdater` instance.

    Strings are looked up in `UpdaterRegistry` and instantiated with default
    hyperparameters.

    Raises
    ------
    InvalidArgumentError
        If `updater` is neither a registered name nor an `IUpdater`.
    """
    if isinstance(updater, str):
        try:
            return UpdaterRegistry.create(updater)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
    if not isinstance(updater, IUpdater):
        raise InvalidArgumentError(
            f"updater must be an IUpdater or a registered name, got {type(updater).__name__}"
        )
    return updater


def _require_positive(name: str, value: float) -> None:
    if value <= 0.0:
        raise ValueError(f"{name} must be > 0, got {value}")


def _require_unit_interval(name: str, value: float) -> None:
    if not 0.0 < value < 1.0:
        raise ValueError(f"{name} must be in (0,1), got {value}")
