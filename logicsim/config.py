import json

from logicsim import resource

CONFIG_FILE = "logicsim/config.json"


def _merge(base, override):
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def defaults():
    with open(resource.path(CONFIG_FILE)) as file:
        return json.load(file)


def load(path=None):
    """Bundled defaults, overridden by the JSON file at ``path`` if given."""
    config = defaults()
    if path is None:
        return config

    with open(path) as file:
        return _merge(config, json.load(file))
