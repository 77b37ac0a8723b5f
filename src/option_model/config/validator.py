from __future__ import annotations

from collections.abc import Mapping


class ConfigError(ValueError):
    # Raised for option files that cannot back a model (fail fast).
    pass


def validate_option_tree(raw: object) -> dict[str, object]:
    # Option trees are addressed by string paths, so every mapping key must be a string.
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    _validate_node(raw, "")
    return raw


def _validate_node(node: object, location: str) -> None:
    if isinstance(node, Mapping):
        for key, value in node.items():
            if not isinstance(key, str):
                where = location or "<root>"
                raise ConfigError(f"{where} has non-string key {key!r}; quote it in the YAML source")
            _validate_node(value, _join(location, key))
    elif isinstance(node, list):
        for index, item in enumerate(node):
            _validate_node(item, _join(location, str(index)))


def _join(location: str, key: str) -> str:
    return f"{location}.{key}" if location else key
