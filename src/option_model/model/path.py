from __future__ import annotations

from collections.abc import Mapping, Sequence

# Paths address nodes of an option tree: "a.b.c" or ["a", "b", "c"].
PathLike = str | Sequence[str]


def parse_path(path: PathLike | None) -> list[str] | None:
    # Normalize a path into its key list; None stays None.
    if path is None:
        return None
    if isinstance(path, str):
        return path.split(".")
    if isinstance(path, (list, tuple)):
        for key in path:
            if not isinstance(key, str):
                raise TypeError(f"Path segments must be strings, got {type(key).__name__}: {key!r}")
        return list(path)
    raise TypeError(f"Path must be a string or a list of strings, got {type(path).__name__}")


def walk_path(node: object, keys: Sequence[str]) -> object | None:
    # Node-local walk without any fallback; empty segments are skipped.
    for key in keys:
        if not key:
            continue
        node = child(node, key)
        if node is None:
            break
    return node


def child(node: object, key: str) -> object | None:
    # One traversal step; scalars and None cannot be descended.
    if isinstance(node, Mapping):
        return node.get(key)
    if isinstance(node, (list, tuple)):
        if not _is_index(key):
            return None
        index = int(key)
        return node[index] if index < len(node) else None
    return None


def _is_index(key: object) -> bool:
    # Canonical decimal only: "01" is a key, not an index.
    return isinstance(key, str) and key.isascii() and key.isdigit() and key == str(int(key))
