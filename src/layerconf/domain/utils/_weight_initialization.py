"""
Weight-initialization contract and fan helpers.

Weight initializers fill a parameter view in place. The domain layer only
fixes the dispatcher interface and the fan-in / fan-out arithmetic; the
name registry and the numerical strategies are provided by the
infrastructure layer.

Dense weight views are ``(n_in, n_out)``: rows are inputs, columns are
outputs.
"""

from typing import Callable, Dict, TypeVar
from abc import ABC, abstractmethod

from ..types._array import ArrayView


T = TypeVar("T", bound=Callable[..., ArrayView])


class _WeightInitializer(ABC):
    """
    Dispatcher interface for named weight-initialization strategies.

    A dispatcher is constructed from a strategy name and then called with
    the view to fill. Strategies mutate the view and return the same object;
    they never allocate a replacement.
    """

    INITIALIZERS: Dict[str, Callable] = {}

    @classmethod
    @abstractmethod
    def register_initializer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Return a decorator that records a strategy under `name`.
        """

    @classmethod
    @abstractmethod
    def available(cls) -> tuple[str, ...]:
        """Sorted names of the recorded strategies."""

    @classmethod
    @abstractmethod
    def is_registered(cls, name: str) -> bool:
        """Whether `name` resolves to a recorded strategy."""

    @abstractmethod
    def __call__(self, view: ArrayView, *args, **kwargs) -> ArrayView:
        """
        Fill `view` in place and return it.
        """


def _calculate_fan_in_and_fan_out(shape: tuple[int, ...]) -> tuple[int, int]:
    """
    Return ``(fan_in, fan_out)`` for a view of the given shape.

    Parameters
    ----------
    shape:
        View shape. Scalars count as 1 in each direction, vectors as their
        length, dense matrices as ``(n_in, n_out)``; for higher ranks the
        trailing dimensions form a receptive field that scales both fans.

    Returns
    -------
    tuple[int, int]
        Number of inputs feeding one output unit and number of outputs one
        input unit feeds.
    """
    rank = len(shape)
    if rank == 0:
        return 1, 1
    if rank == 1:
        return int(shape[0]), int(shape[0])

    n_in, n_out = int(shape[0]), int(shape[1])
    receptive_field = 1
    for extent in shape[2:]:
        receptive_field *= int(extent)
    return n_in * receptive_field, n_out * receptive_field


def _calculate_fan_in(shape: tuple[int, ...]) -> int:
    return _calculate_fan_in_and_fan_out(shape)[0]
