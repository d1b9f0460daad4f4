"""
YAML configuration of the sampling and drawing settings.

Example file:

    sampling:
      n_points: 200
      t_range: [0.0, 1.0]
    frame:
      length: 0.5
      eps: 1.0e-6

Missing items are taken from DEFAULT_CONFIG. The values are used by
`sampling.sample_polyline`, `sampling.sample_frames` and the debug plotting.
"""
import copy

import yaml

from .errors import ParamError


class ConfigLoader(yaml.SafeLoader):
    """Safe YAML loader keeping dates and timestamps as plain strings."""


ConfigLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regex) for tag, regex in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class dotdict(dict):
    """
    Dictionary with attribute access to its items: cfg.sampling.n_points.
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            raise AttributeError(f"Missing config item: '{item}'") from None


def _to_dotdict(value):
    if isinstance(value, dict):
        return dotdict((k, _to_dotdict(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return type(value)(_to_dotdict(v) for v in value)
    return value


def _to_plain(value):
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


DEFAULT_CONFIG = {
    'sampling': {
        'n_points': 100,
        't_range': [0.0, 1.0],
    },
    'frame': {
        'n_points': 10,
        'length': 1.0,
        'eps': 1e-6,
    },
}


def deep_merge(base: dict, update: dict) -> dict:
    """
    Return copy of 'base' with items of 'update' recursively merged in.
    """
    result = copy.deepcopy(base)
    for key, val in update.items():
        if isinstance(val, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], val)
        else:
            result[key] = copy.deepcopy(val)
    return result


def make_config(overrides=None) -> dotdict:
    """
    Config from DEFAULT_CONFIG updated by the nested dict 'overrides'.
    """
    return _to_dotdict(deep_merge(DEFAULT_CONFIG, overrides or {}))


def load_config(path=None) -> dotdict:
    """
    Load configuration from given YAML file over the DEFAULT_CONFIG.
    :param path: YAML file, None for the defaults only.
    """
    cfg = {}
    if path is not None:
        with open(path) as f:
            cfg = yaml.load(f, Loader=ConfigLoader)
        if cfg is None:
            cfg = {}
        if not isinstance(cfg, dict):
            raise ParamError(f"Configuration {path} must be a mapping, got {type(cfg).__name__}.")
    return make_config(cfg)


def dump_config(config, path):
    with open(path, "w") as f:
        yaml.safe_dump(_to_plain(config), f)
