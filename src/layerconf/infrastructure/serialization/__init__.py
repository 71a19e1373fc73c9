"""
Configuration serialization registry and JSON helpers.

Importing this package also registers the input-type descriptors.
"""

from ._serialization_core import (
    register_config,
    config_to_dict,
    config_from_dict,
    to_json,
    from_json,
)
from . import _input_types  # noqa: F401

__all__ = [
    register_config.__name__,
    config_to_dict.__name__,
    config_from_dict.__name__,
    to_json.__name__,
    from_json.__name__,
]
