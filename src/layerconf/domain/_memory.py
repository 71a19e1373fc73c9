"""
Memory accounting vocabulary.

Enumerations shared by memory reports and their consumers:

- `MemoryUseMode`: whether memory is being planned for inference or training.
- `CacheMode`: where (if anywhere) a caching execution mode retains
  intermediate results.
- `MemoryType`: the categories a layer's footprint is broken down into.

These enums are backend-agnostic and carry no sizing logic themselves.
"""

from enum import Enum


class MemoryUseMode(Enum):
    """
    Execution phase the memory is planned for.

    Attributes
    ----------
    INFERENCE : MemoryUseMode
        Forward pass only. No gradients, updater state, or caches are held.
    TRAINING : MemoryUseMode
        Forward and backward passes with parameter updates.
    """

    INFERENCE = "inference"
    TRAINING = "training"


class CacheMode(Enum):
    """
    Caching execution mode.

    Attributes
    ----------
    NONE : CacheMode
        No caching; intermediate results are recomputed.
    HOST : CacheMode
        Intermediate results are cached in host memory.
    DEVICE : CacheMode
        Intermediate results are cached in device memory.
    """

    NONE = "none"
    HOST = "host"
    DEVICE = "device"


class MemoryType(Enum):
    """
    Categories of a layer's memory footprint.

    Fixed categories do not depend on the minibatch size; variable ones are
    expressed per example and scale linearly with it.
    """

    PARAMETERS = "parameters"
    PARAMETER_GRADIENTS = "parameter_gradients"
    UPDATER_STATE = "updater_state"
    WORKING_MEMORY_FIXED = "working_memory_fixed"
    WORKING_MEMORY_VARIABLE = "working_memory_variable"
    CACHED_MEMORY_FIXED = "cached_memory_fixed"
    CACHED_MEMORY_VARIABLE = "cached_memory_variable"

    def is_variable(self) -> bool:
        """
        Return True if this category scales with the minibatch size.
        """
        return self in (
            MemoryType.WORKING_MEMORY_VARIABLE,
            MemoryType.CACHED_MEMORY_VARIABLE,
        )
