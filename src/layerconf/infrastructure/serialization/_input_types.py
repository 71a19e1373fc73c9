"""
Serialization registration for the domain input-type descriptors.

Input types live in the domain layer, which must not import the
infrastructure registry, so they are registered here instead.
"""

from ._serialization_core import register_config
from ...domain._input_type import (
    ConvolutionalFlatInput,
    ConvolutionalInput,
    FeedForwardInput,
    RecurrentInput,
)

for _cls in (FeedForwardInput, RecurrentInput, ConvolutionalInput, ConvolutionalFlatInput):
    register_config()(_cls)
