from __future__ import annotations

from pathlib import Path

import pytest

from option_model.config.loader import load_layers, load_model, load_yaml_config, parse_override
from option_model.config.validator import ConfigError
from option_model.observability.adapters.logging import MemoryLogSink


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_yaml_config_returns_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "cfg.yml", "color: red\nline:\n  width: 2\n")
    data = load_yaml_config(path)
    assert data == {"color": "red", "line": {"width": 2}}


def test_load_yaml_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "cfg.yml", "[]\n")
    with pytest.raises(ConfigError):
        load_yaml_config(path)


def test_load_yaml_config_rejects_empty_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "cfg.yml", "")
    with pytest.raises(ConfigError):
        load_yaml_config(path)


def test_load_yaml_config_wraps_yaml_errors(tmp_path: Path) -> None:
    path = _write(tmp_path, "cfg.yml", "a: [1, 2\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_yaml_config(path)


def test_load_model_wraps_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "cfg.yml", "line:\n  width: 2\n")
    model = load_model(path)
    assert model.get("line.width") == 2
    assert model.parent_model is None


def test_load_layers_chains_parents_in_order(tmp_path: Path) -> None:
    # Later files are more specific and fall back to earlier ones.
    base = _write(tmp_path, "base.yml", "color: red\nline:\n  width: 2\n  type: solid\n")
    chart = _write(tmp_path, "chart.yml", "line:\n  width: 5\n")
    series = _write(tmp_path, "series.yml", "name: s1\n")
    model = load_layers([base, chart, series])
    assert model.get("name") == "s1"
    assert model.get("line.width") == 5
    assert model.get("line.type") == "solid"
    assert model.get("color") == "red"
    assert model.get_model("line").get("color") is None
    assert model.parent_model is not None
    assert model.parent_model.get("line.width", ignore_parent=True) == 5
    assert model.root_model is model.parent_model.parent_model


def test_load_layers_logs_each_layer(tmp_path: Path) -> None:
    base = _write(tmp_path, "base.yml", "b: 1\na: 2\n")
    top = _write(tmp_path, "top.yml", "c: 3\n")
    sink = MemoryLogSink()
    load_layers([base, top], log_sink=sink)
    assert [msg.fields["depth"] for msg in sink.messages] == [0, 1]
    assert sink.messages[0].level == "info"
    assert sink.messages[0].fields["keys"] == ["a", "b"]
    assert sink.messages[1].fields["path"] == str(top)


def test_load_layers_requires_a_path() -> None:
    with pytest.raises(ConfigError):
        load_layers([])


def test_parse_override_builds_nested_patch() -> None:
    assert parse_override("line.width=4") == {"line": {"width": 4}}
    assert parse_override("show=true") == {"show": True}
    assert parse_override("name=bar chart") == {"name": "bar chart"}
    assert parse_override("dash=[2, 2]") == {"dash": [2, 2]}
    assert parse_override("cleared=") == {"cleared": None}


@pytest.mark.parametrize("text", ["no-equals", "=1", "..=1", "a=[1"])
def test_parse_override_rejects_malformed_text(text: str) -> None:
    with pytest.raises(ConfigError):
        parse_override(text)
