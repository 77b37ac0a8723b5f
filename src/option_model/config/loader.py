from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import yaml

from option_model.config.validator import ConfigError, validate_option_tree
from option_model.model.model import Model
from option_model.observability.adapters.logging import LogSink
from option_model.observability.domain.logging import LogMessage


def load_yaml_config(path: Path) -> dict[str, object]:
    # YAML loader; returns a validated raw option tree.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    return validate_option_tree(raw)


def load_model(path: Path, parent_model: Model | None = None, root_model: object = None) -> Model:
    return Model(load_yaml_config(path), parent_model, root_model)


def load_layers(paths: Sequence[Path], *, log_sink: LogSink | None = None) -> Model:
    # First file is the base layer and hierarchy root; each later file falls back to the one before it.
    if not paths:
        raise ConfigError("At least one config layer is required")

    base: Model | None = None
    model: Model | None = None
    for depth, path in enumerate(paths):
        model = load_model(Path(path), model, base)
        if base is None:
            base = model
        if log_sink is not None:
            log_sink.emit(
                LogMessage(
                    level="info",
                    message="config layer loaded",
                    fields={"path": str(path), "depth": depth, "keys": sorted(model.option)},
                )
            )
    assert model is not None
    return model


def parse_override(text: str) -> dict[str, object]:
    # "a.b=value" becomes {"a": {"b": value}}; the value is read as a YAML scalar.
    path, sep, raw_value = text.partition("=")
    keys = [key for key in path.strip().split(".") if key]
    if not sep or not keys:
        raise ConfigError(f"Override must look like 'path.to.key=value', got {text!r}")
    try:
        value = yaml.safe_load(raw_value) if raw_value.strip() else None
    except yaml.YAMLError as exc:
        raise ConfigError(f"Override {text!r} has an invalid value: {exc}") from exc

    patch: dict[str, object] = {keys[-1]: value}
    for key in reversed(keys[:-1]):
        patch = {key: patch}
    return patch
