"""
JSON serialization registry for configuration objects.

Layer configurations and the descriptors they embed (updaters, dropout
policies, constraints, input types) are exported as typed nodes:

    {
      "type": "DenseLayer",
      "config": {...}
    }

Nested configuration objects appear inside "config" as nodes of the same
shape, so a whole layer configuration round-trips through JSON.

Classes opt in with the `register_config` decorator and may provide
`get_config()` / `from_config(cfg)` hooks. Dataclasses without hooks are
exported field by field and rebuilt with keyword arguments.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, Dict, Optional, Type

_CONFIG_REGISTRY: dict[str, Type[Any]] = {}


def register_config(name: Optional[str] = None) -> Callable[[Type[Any]], Type[Any]]:
    """
    Decorator to register a configuration class for JSON deserialization.
    """

    def deco(cls: Type[Any]) -> Type[Any]:
        key = name or cls.__name__
        _CONFIG_REGISTRY[key] = cls
        return cls

    return deco


def registered_type(name: str) -> Type[Any]:
    """
    Return the class registered under `name`.

    Raises
    ------
    ValueError
        If no class is registered under `name`.
    """
    try:
        return _CONFIG_REGISTRY[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown config type '{name}'. Register it via @register_config."
        ) from e


def config_to_dict(obj: Any) -> dict[str, Any]:
    """
    Convert a configuration object into a JSON-serializable typed node.
    """
    get_cfg = getattr(obj, "get_config", None)
    if callable(get_cfg):
        cfg = get_cfg()
    elif dataclasses.is_dataclass(obj):
        cfg = {
            f.name: getattr(obj, f.name) for f in dataclasses.fields(obj) if f.init
        }
    else:
        raise TypeError(
            f"Cannot serialize {type(obj).__name__}: no get_config() and not a dataclass"
        )

    return {"type": obj.__class__.__name__, "config": cfg}


def config_from_dict(node: Dict[str, Any]) -> Any:
    """
    Rebuild a configuration object from a typed node.
    """
    cls = registered_type(str(node["type"]))
    cfg = node.get("config", {}) or {}

    from_cfg = getattr(cls, "from_config", None)
    if callable(from_cfg):
        return from_cfg(cfg)
    return cls(**cfg)


def optional_to_dict(obj: Any) -> Optional[dict[str, Any]]:
    """
    `config_to_dict` that passes None through.
    """
    return None if obj is None else config_to_dict(obj)


def optional_from_dict(node: Optional[Dict[str, Any]]) -> Any:
    """
    `config_from_dict` that passes None through.
    """
    return None if node is None else config_from_dict(node)


def to_json(obj: Any, *, indent: Optional[int] = 2) -> str:
    """
    Serialize a registered configuration object to a JSON string.
    """
    return json.dumps(config_to_dict(obj), indent=indent, sort_keys=True)


def from_json(text: str) -> Any:
    """
    Rebuild a configuration object from a JSON string.
    """
    return config_from_dict(json.loads(text))
