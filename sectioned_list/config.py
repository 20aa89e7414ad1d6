"""sectioned_list config loader.

Reads sectioned_list.config (YAML) from the project directory.
Caches result after first load. Call _reset_config() in tests.
"""

import copy
import os
import yaml

from sectioned_list.exceptions import SectionedListConfigError

CONFIG_FILENAME = "sectioned_list.config"

_config = None

DEFAULTS = {
    "grouping": {
        "strategy": "stable",
    },
    "logging": {
        "verbose": False,
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base, returning a new dict."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def get_config(config_dir: str | None = None) -> dict:
    """Load and return the sectioned_list config, caching after first call."""
    global _config
    if _config is not None:
        return _config

    if config_dir is None:
        config_dir = os.getcwd()

    config_path = os.path.join(config_dir, CONFIG_FILENAME)

    if os.path.exists(config_path):
        with open(config_path) as f:
            user_config = yaml.safe_load(f)
        if user_config is None:
            _config = _deep_merge(copy.deepcopy(DEFAULTS), {})
        elif isinstance(user_config, dict):
            _config = _deep_merge(copy.deepcopy(DEFAULTS), user_config)
        else:
            raise SectionedListConfigError(
                f"{config_path} must contain a mapping, got {type(user_config).__name__}"
            )
    else:
        _config = _deep_merge(copy.deepcopy(DEFAULTS), {})

    return _config


def _reset_config():
    """Clear cached config. Call this in tests."""
    global _config
    _config = None
