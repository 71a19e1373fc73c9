"""
layerconf: configuration and resource accounting for dense layers.

Build a frozen layer configuration, size and plan its memory without
running anything, then bind it to a slice of a network-wide parameter
buffer:

    import numpy as np
    from layerconf import DenseLayer, InputType

    conf = DenseLayer.builder().n_in(10).n_out(5).updater("adam").build()
    report = conf.memory_report(InputType.feed_forward(10))

    buffer = np.zeros(conf.num_params(), dtype=np.float32)
    layer = conf.instantiate(buffer, layer_index=0)
"""

from .domain._errors import (
    BufferTooSmallError,
    ConfigurationIncompleteError,
    InvalidArgumentError,
)
from .domain._input_type import (
    ConvolutionalFlatInput,
    ConvolutionalInput,
    FeedForwardInput,
    InputType,
    RecurrentInput,
)
from .domain._layer import IBoundLayer, IIterationListener, ILayerConfig, IParamInitializer
from .domain._memory import CacheMode, MemoryType, MemoryUseMode
from .domain._updater import IUpdater
from .infrastructure.layers import (
    Activation,
    AlphaDropout,
    BoundDenseLayer,
    DenseLayer,
    DenseLayerBuilder,
    Dropout,
    FeedForwardConfig,
    GaussianDropout,
    GaussianNoise,
    MaxNormConstraint,
    MinMaxNormConstraint,
    NonNegativeConstraint,
    UnitNormConstraint,
    instantiate,
    memory_report,
    num_params,
    output_type,
)
from .infrastructure.memory import MemoryReport
from .infrastructure.params import DefaultParamInitializer
from .infrastructure.serialization import (
    config_from_dict,
    config_to_dict,
    from_json,
    register_config,
    to_json,
)
from .infrastructure.updaters import (
    AdaDelta,
    AdaGrad,
    AdaMax,
    Adam,
    AmsGrad,
    Nadam,
    Nesterovs,
    NoOp,
    RmsProp,
    Sgd,
    UpdaterRegistry,
)
from .infrastructure.utils.weight_initializer import WeightInitializer

__version__ = "0.1.0"
