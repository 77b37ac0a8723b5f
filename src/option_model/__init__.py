from .config import ConfigError, load_layers, load_model, load_yaml_config, resolve_settings
from .model import Model, ReadOnlyError, TypedGetters, mixin
from .util import clone, merge

__all__ = [
    "Model",
    "ReadOnlyError",
    "TypedGetters",
    "mixin",
    "clone",
    "merge",
    "ConfigError",
    "load_yaml_config",
    "load_model",
    "load_layers",
    "resolve_settings",
]
