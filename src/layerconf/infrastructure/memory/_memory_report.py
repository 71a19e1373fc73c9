"""
Static memory reports for a single layer.

A `MemoryReport` summarizes what one layer needs at execution time, derived
purely from its configuration and input type:

- standard (fixed) memory: parameters and optimizer state;
- working memory: transient buffers, split into a fixed part and a
  per-example (variable) part, for each of inference and training;
- cache memory: buffers retained only under a caching execution mode.

All counts are in *elements*. Conversion to bytes happens on demand via
`memory_bytes` / `total_memory_bytes`, given a minibatch size, an execution
phase, a cache mode, and an element dtype.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import numpy as np

from ...domain._errors import InvalidArgumentError
from ...domain._input_type import IInputType
from ...domain._memory import CacheMode, MemoryType, MemoryUseMode


def _frozen_cache_map(values: Optional[Mapping[CacheMode, int]]) -> Mapping[CacheMode, int]:
    values = dict(values or {})
    return MappingProxyType({mode: int(values.get(mode, 0)) for mode in CacheMode})


CACHE_MODE_ALL_ZEROS: Mapping[CacheMode, int] = _frozen_cache_map(None)


@dataclass(frozen=True)
class MemoryReport:
    """
    Memory footprint of one layer, in elements.

    Attributes
    ----------
    layer_name : Optional[str]
        Name of the reported layer, if any.
    layer_type : str
        Layer kind (e.g. "DenseLayer").
    input_type, output_type : IInputType
        Shapes the report was computed for.
    standard_memory_params : int
        Number of parameters.
    standard_memory_updater_state : int
        Number of optimizer-state elements.
    working_memory_fixed_inference, working_memory_fixed_training : int
        Working memory that does not scale with the minibatch size.
    working_memory_variable_inference, working_memory_variable_training : int
        Working memory per example.
    cache_memory_fixed, cache_memory_variable : Mapping[CacheMode, int]
        Cache memory (fixed / per example) for each cache mode.

    Notes
    -----
    Instances are immutable, compared by value and hashable; every field is
    >= 0.
    """

    layer_name: Optional[str]
    layer_type: str
    input_type: IInputType
    output_type: IInputType
    standard_memory_params: int
    standard_memory_updater_state: int
    working_memory_fixed_inference: int = 0
    working_memory_fixed_training: int = 0
    working_memory_variable_inference: int = 0
    working_memory_variable_training: int = 0
    # read-only maps are compared but left out of the hash
    cache_memory_fixed: Mapping[CacheMode, int] = field(
        default_factory=lambda: CACHE_MODE_ALL_ZEROS, hash=False
    )
    cache_memory_variable: Mapping[CacheMode, int] = field(
        default_factory=lambda: CACHE_MODE_ALL_ZEROS, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "cache_memory_fixed", _frozen_cache_map(self.cache_memory_fixed))
        object.__setattr__(
            self, "cache_memory_variable", _frozen_cache_map(self.cache_memory_variable)
        )

        counts = {
            "standard_memory_params": self.standard_memory_params,
            "standard_memory_updater_state": self.standard_memory_updater_state,
            "working_memory_fixed_inference": self.working_memory_fixed_inference,
            "working_memory_fixed_training": self.working_memory_fixed_training,
            "working_memory_variable_inference": self.working_memory_variable_inference,
            "working_memory_variable_training": self.working_memory_variable_training,
        }
        for mode in CacheMode:
            counts[f"cache_memory_fixed[{mode.value}]"] = self.cache_memory_fixed[mode]
            counts[f"cache_memory_variable[{mode.value}]"] = self.cache_memory_variable[mode]
        for name, value in counts.items():
            if value < 0:
                raise InvalidArgumentError(f"{name} must be >= 0, got {value}")

    def cache_memory_fixed_for(self, cache_mode: CacheMode) -> int:
        return self.cache_memory_fixed[cache_mode]

    def cache_memory_variable_for(self, cache_mode: CacheMode) -> int:
        return self.cache_memory_variable[cache_mode]

    def working_memory_fixed(self, memory_use_mode: MemoryUseMode) -> int:
        if memory_use_mode is MemoryUseMode.INFERENCE:
            return self.working_memory_fixed_inference
        return self.working_memory_fixed_training

    def working_memory_variable(self, memory_use_mode: MemoryUseMode) -> int:
        if memory_use_mode is MemoryUseMode.INFERENCE:
            return self.working_memory_variable_inference
        return self.working_memory_variable_training

    def memory_elements(
        self,
        memory_type: MemoryType,
        minibatch_size: int,
        memory_use_mode: MemoryUseMode,
        cache_mode: CacheMode = CacheMode.NONE,
    ) -> int:
        """
        Return the element count of one memory category.

        Parameter gradients, updater state and caches exist only while
        training; they count as zero in inference mode.

        Parameters
        ----------
        memory_type : MemoryType
            Category to report.
        minibatch_size : int
            Number of examples per minibatch. Must be positive.
        memory_use_mode : MemoryUseMode
            Execution phase.
        cache_mode : CacheMode, optional
            Caching execution mode. Defaults to `CacheMode.NONE`.

        Returns
        -------
        int
            Number of elements.
        """
        if minibatch_size <= 0:
            raise InvalidArgumentError(
                f"minibatch_size must be a positive integer, got {minibatch_size}"
            )
        training = memory_use_mode is MemoryUseMode.TRAINING

        if memory_type is MemoryType.PARAMETERS:
            return self.standard_memory_params
        if memory_type is MemoryType.PARAMETER_GRADIENTS:
            return self.standard_memory_params if training else 0
        if memory_type is MemoryType.UPDATER_STATE:
            return self.standard_memory_updater_state if training else 0
        if memory_type is MemoryType.WORKING_MEMORY_FIXED:
            return self.working_memory_fixed(memory_use_mode)
        if memory_type is MemoryType.WORKING_MEMORY_VARIABLE:
            return self.working_memory_variable(memory_use_mode) * minibatch_size
        if memory_type is MemoryType.CACHED_MEMORY_FIXED:
            return self.cache_memory_fixed[cache_mode] if training else 0
        if memory_type is MemoryType.CACHED_MEMORY_VARIABLE:
            return self.cache_memory_variable[cache_mode] * minibatch_size if training else 0
        raise InvalidArgumentError(f"Unknown memory type: {memory_type!r}")

    def memory_bytes(
        self,
        memory_type: MemoryType,
        minibatch_size: int,
        memory_use_mode: MemoryUseMode,
        cache_mode: CacheMode = CacheMode.NONE,
        data_type: Any = "float32",
    ) -> int:
        """
        Return the size in bytes of one memory category.

        `data_type` is anything `numpy.dtype` accepts ("float16", np.float64,
        ...); its item size is the number of bytes per element.
        """
        bytes_per_element = np.dtype(data_type).itemsize
        return (
            self.memory_elements(memory_type, minibatch_size, memory_use_mode, cache_mode)
            * bytes_per_element
        )

    def total_memory_bytes(
        self,
        minibatch_size: int,
        memory_use_mode: MemoryUseMode,
        cache_mode: CacheMode = CacheMode.NONE,
        data_type: Any = "float32",
    ) -> int:
        """
        Return the sum of `memory_bytes` over every memory category.
        """
        return sum(
            self.memory_bytes(mt, minibatch_size, memory_use_mode, cache_mode, data_type)
            for mt in MemoryType
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable view of this report.
        """
        return {
            "layer_name": self.layer_name,
            "layer_type": self.layer_type,
            "input_type": {
                "type": type(self.input_type).__name__,
                "config": self.input_type.get_config(),
            },
            "output_type": {
                "type": type(self.output_type).__name__,
                "config": self.output_type.get_config(),
            },
            "standard_memory_params": self.standard_memory_params,
            "standard_memory_updater_state": self.standard_memory_updater_state,
            "working_memory_fixed_inference": self.working_memory_fixed_inference,
            "working_memory_fixed_training": self.working_memory_fixed_training,
            "working_memory_variable_inference": self.working_memory_variable_inference,
            "working_memory_variable_training": self.working_memory_variable_training,
            "cache_memory_fixed": {m.value: v for m, v in self.cache_memory_fixed.items()},
            "cache_memory_variable": {
                m.value: v for m, v in self.cache_memory_variable.items()
            },
        }

    def format_summary(self) -> str:
        """Multi-line human-readable summary (element counts)."""
        name = self.layer_name if self.layer_name is not None else "<unnamed>"
        return "\n".join(
            [
                f"{self.layer_type} ({name}): {self.input_type} -> {self.output_type}",
                f"  parameters:        {self.standard_memory_params}",
                f"  updater state:     {self.standard_memory_updater_state}",
                "  working (fixed):   "
                f"inference={self.working_memory_fixed_inference} "
                f"training={self.working_memory_fixed_training}",
                "  working (per ex.): "
                f"inference={self.working_memory_variable_inference} "
                f"training={self.working_memory_variable_training}",
            ]
        )
