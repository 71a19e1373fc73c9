"""
Parameter initializers.
"""

from ._default import DefaultParamInitializer, WEIGHT_KEY, BIAS_KEY

__all__ = [
    DefaultParamInitializer.__name__,
    "WEIGHT_KEY",
    "BIAS_KEY",
]
