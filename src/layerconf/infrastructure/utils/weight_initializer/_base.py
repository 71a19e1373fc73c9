"""
Name-keyed registry of weight-initialization strategies.

Parameter initializers look strategies up by the name stored in a layer
configuration (``weight_init="xavier"``) and apply them to the weight view
carved out of the network's flat parameter buffer:

    WeightInitializer("xavier")(weight_view)

A strategy is a function ``(view) -> view`` that overwrites the elements of
`view`. The view aliases storage owned by the caller, so a strategy assigns
through ``view[...] = ...`` and never rebinds or resizes it. New strategies
are added with the `register_initializer` decorator:

    @WeightInitializer.register_initializer("zeros")
    def zeros(view: np.ndarray) -> np.ndarray:
        view[...] = 0.0
        return view
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, TypeVar

import numpy as np

from ....domain.utils._weight_initialization import _WeightInitializer

T = TypeVar("T", bound=Callable[..., np.ndarray])


class WeightInitializer(_WeightInitializer):
    """
    Callable bound to one registered strategy.

    Parameters
    ----------
    initializer_name : str
        Registry key of the strategy to apply.

    Raises
    ------
    ValueError
        If `initializer_name` is not registered. The message lists the
        registered names.
    """

    INITIALIZERS: ClassVar[Dict[str, Callable[..., np.ndarray]]] = {}

    def __init__(self, initializer_name: str) -> None:
        strategy = self.INITIALIZERS.get(initializer_name)
        if strategy is None:
            names = ", ".join(self.available()) or "<none>"
            raise ValueError(
                f"Unsupported initializer name: {initializer_name!r}. Available: {names}"
            )
        self.name = initializer_name
        self._strategy: Callable[..., np.ndarray] = strategy

    @classmethod
    def register_initializer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator recording `func` under `name`.

        Re-registering an existing name raises ValueError unless
        `overwrite` is True.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Initializer name must be a non-empty string")

        def decorator(func: T) -> T:
            if name in cls.INITIALIZERS and not overwrite:
                raise ValueError(f"Initializer already registered: {name!r}")
            cls.INITIALIZERS[name] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        return tuple(sorted(cls.INITIALIZERS))

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls.INITIALIZERS

    @classmethod
    def get(cls, name: str) -> Callable[..., np.ndarray]:
        """Return the raw strategy function registered as `name`."""
        return cls.INITIALIZERS[name]

    def __call__(self, view: np.ndarray, *args: Any, **kwargs: Any) -> np.ndarray:
        return self._strategy(view, *args, **kwargs)
