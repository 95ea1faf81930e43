"""Configuration loading."""

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULTS: Dict[str, Any] = {
    'generation': {
        'count': 50,
        'min_score': 40,
        'style': None,
    },
    'ai': {
        'model': 'gemini-1.5-pro',
        'temperature': 0.9,
    },
    'logging': {
        'level': 'WARNING',
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """Load configuration from YAML file, layered over the defaults."""
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            return _merge(DEFAULTS, yaml.safe_load(f) or {})
    return copy.deepcopy(DEFAULTS)


def get_setting(config: dict, path: str, default: Any = None) -> Any:
    """Look up a dotted path such as ``generation.count``."""
    node: Any = config
    for key in path.split('.'):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return default if node is None else node
