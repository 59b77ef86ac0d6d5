"""YAML config loader with runtime get/set."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from windplot.config.defaults import DEFAULT_PRODUCTS
from windplot.config.schema import WindplotConfig


def load_config(path: str | Path) -> WindplotConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty document yields the defaults. Product entries
    in the YAML are merged over DEFAULT_PRODUCTS.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    products = {k.value: v.model_dump() for k, v in DEFAULT_PRODUCTS.items()}
    for key, overrides in (raw.get("products") or {}).items():
        products[key] = {**products.get(key, {}), **(overrides or {})}
    raw["products"] = products

    return WindplotConfig(**raw)


def save_config(config: WindplotConfig, path: str | Path) -> None:
    """Write the full config back to a YAML file."""
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)


def config_hash(config: WindplotConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: WindplotConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'nomads.timeout'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: WindplotConfig, dotted_key: str, value: Any) -> WindplotConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new WindplotConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return WindplotConfig(**data)
