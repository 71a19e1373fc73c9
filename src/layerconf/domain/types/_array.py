"""
Domain-level structural typing for flat parameter buffers.

This module defines :class:`ArrayView`, a **backend-agnostic Protocol**
describing the subset of ``numpy.ndarray`` behavior the binding layer relies
on when it slices a caller-owned parameter buffer into named views.

Design intent
-------------
- Avoids importing NumPy in the domain layer.
- Documents the aliasing contract: slicing and reshaping must return views
  over the same storage, never copies.
- Keeps the API surface minimal: shape, length, dtype, slicing, reshaping
  and in-place assignment.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class ArrayView(Protocol):
    """
    A view over externally owned array storage.

    Notes
    -----
    - Implementers are expected to follow NumPy view semantics: basic
      slicing and reshaping of a 1-D buffer must alias the same memory.
    - The binding layer never resizes or reallocates a view.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the view as a tuple of dimension sizes.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Number of dimensions of the view.
        """
        ...

    @property
    def size(self) -> int:
        """
        Total number of elements in the view.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Backend-defined element type descriptor.
        """
        ...

    def reshape(self, *shape: int) -> ArrayView:
        """
        Return a view with a new shape over the same storage.
        """
        ...

    def __getitem__(self, key: Any) -> Any: ...

    def __setitem__(self, key: Any, value: Any) -> None: ...
