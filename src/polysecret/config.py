"""Default configuration and a JSON loader to override it."""

import json
import logging
from pathlib import Path

from polysecret.matrix import DEFAULT_PIVOT_EPSILON

DEFAULT_CONFIG = {
    'inputs': ['testcase1.json', 'testcase2.json'],
    'pivot_epsilon': DEFAULT_PIVOT_EPSILON,
    'log_level': 'WARNING',
}


def load_config(path: str, base: dict = None) -> dict:
    """Load a JSON config file and shallow-merge it over base.

    Args:
        path: JSON file holding an object with any of the DEFAULT_CONFIG keys.
        base: Configuration to update; DEFAULT_CONFIG when None.

    Returns:
        A new merged dict. base is left untouched.
    """
    merged = dict(base if base is not None else DEFAULT_CONFIG)
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open('r', encoding='utf-8') as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a JSON object")
    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    for key, value in data.items():
        _check_value(key, value, path)
    merged.update(data)
    return merged


def _check_value(key: str, value, path: str):
    """Raise ValueError unless value has the type DEFAULT_CONFIG[key] expects."""
    if key == 'inputs':
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"{path}: inputs must be a list of file paths, got {value!r}")
    elif key == 'pivot_epsilon':
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(
                f"{path}: pivot_epsilon must be a non-negative number, got {value!r}")
    elif key == 'log_level':
        if isinstance(value, bool) or not (
                isinstance(value, int)
                or (isinstance(value, str) and isinstance(logging.getLevelName(value), int))):
            raise ValueError(f"{path}: unknown log_level {value!r}")
