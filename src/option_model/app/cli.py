from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from option_model.config.loader import load_layers, parse_override
from option_model.config.validator import ConfigError
from option_model.model.model import Model
from option_model.observability.adapters.logging import JsonlLogSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="option-model",
        description="Resolve a value through layered YAML option files",
    )
    parser.add_argument(
        "--config",
        action="append",
        required=True,
        help="YAML layer; repeat from most general to most specific",
    )
    lookup = parser.add_mutually_exclusive_group()
    lookup.add_argument("--path", help="Dotted path resolved with full-path fallback")
    lookup.add_argument("--shallow", help="Single key resolved one level at a time")
    parser.add_argument("--ignore-parent", action="store_true", help="Read the most specific layer only")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        dest="overrides",
        metavar="PATH=VALUE",
        help="Merge an override into the most specific layer",
    )
    parser.add_argument("--log-path", help="Write layer loading log as JSONL")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_overrides(model: Model, overrides: Sequence[str]) -> None:
    # Overrides are applied in order, later ones win.
    for text in overrides:
        model.merge_option(parse_override(text))


def resolve(model: Model, args: argparse.Namespace) -> object | None:
    if args.shallow is not None:
        return model.get_shallow(args.shallow, args.ignore_parent)
    return model.get(args.path, args.ignore_parent)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    log_sink: JsonlLogSink | None = None
    try:
        if args.log_path:
            log_sink = JsonlLogSink(Path(args.log_path))
        model = load_layers([Path(item) for item in args.config], log_sink=log_sink)
        apply_overrides(model, args.overrides)
        value = resolve(model, args)
    except (ConfigError, OSError) as exc:
        print(f"option-model: {exc}", file=sys.stderr)
        return 2
    finally:
        if log_sink is not None:
            log_sink.close()
    print(json.dumps(value, ensure_ascii=False, default=str))
    return 0
