from .loader import load_layers, load_model, load_yaml_config, parse_override
from .settings import resolve_settings
from .validator import ConfigError, validate_option_tree

__all__ = [
    "ConfigError",
    "validate_option_tree",
    "load_yaml_config",
    "load_model",
    "load_layers",
    "parse_override",
    "resolve_settings",
]
