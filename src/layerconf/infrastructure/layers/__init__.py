"""
Layer configurations, descriptors, and bound runtime layers.
"""

from ._activations import Activation
from ._bound_dense import BoundDenseLayer
from ._constraints import (
    MaxNormConstraint,
    MinMaxNormConstraint,
    NonNegativeConstraint,
    UnitNormConstraint,
)
from ._dense import DenseLayer, DenseLayerBuilder
from ._dropout import AlphaDropout, Dropout, GaussianDropout, GaussianNoise
from ._feed_forward import FeedForwardConfig
from ._layer_ops import instantiate, memory_report, num_params, output_type

__all__ = [
    Activation.__name__,
    BoundDenseLayer.__name__,
    MaxNormConstraint.__name__,
    MinMaxNormConstraint.__name__,
    NonNegativeConstraint.__name__,
    UnitNormConstraint.__name__,
    DenseLayer.__name__,
    DenseLayerBuilder.__name__,
    AlphaDropout.__name__,
    Dropout.__name__,
    GaussianDropout.__name__,
    GaussianNoise.__name__,
    FeedForwardConfig.__name__,
    instantiate.__name__,
    memory_report.__name__,
    num_params.__name__,
    output_type.__name__,
]
