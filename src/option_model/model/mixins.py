from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from option_model.model.path import PathLike

_TRUE_WORDS = frozenset({"1", "y", "yes", "t", "true", "on"})
_FALSE_WORDS = frozenset({"0", "n", "no", "f", "false", "off"})


def mixin(target: type, *bundles: type | Mapping[str, Callable[..., object]]) -> type:
    # Attach capability bundles after the target class is defined.
    # Public members are copied in order, so the last bundle wins on collisions (core methods included).
    for bundle in bundles:
        members = bundle if isinstance(bundle, Mapping) else vars(bundle)
        for name, member in members.items():
            if name.startswith("_"):
                continue
            setattr(target, name, member)
    return target


class TypedGetters:
    # Converting getters over the host class get(); unconvertible values fall back to the default.
    def get_bool(self, path: PathLike, default: bool | None = None) -> bool | None:
        value = self.get(path)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            word = value.strip().lower()
            if word in _TRUE_WORDS:
                return True
            if word in _FALSE_WORDS:
                return False
        return default

    def get_number(self, path: PathLike, default: float | None = None) -> int | float | None:
        value = self.get(path)
        if isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                pass
            try:
                return float(text)
            except ValueError:
                return default
        return default

    def get_list(self, path: PathLike) -> list[object]:
        # Comma-separated strings are split, mirroring INI-style list values.
        value = self.get(path)
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]
