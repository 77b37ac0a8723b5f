from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping


def clone(value: object) -> object:
    # Structural copy; the result shares no nested containers with the input.
    return copy.deepcopy(value)


def merge(target: object, source: object, overwrite: bool = False) -> object:
    # Deep-merge source into target and return the merged value.
    # Mapping targets are mutated in place; lists and scalars are replaced wholesale.
    if not _can_merge(target, source):
        return clone(source) if overwrite else target

    for key, source_value in source.items():
        target_value = target.get(key)
        if _can_merge(target_value, source_value):
            merge(target_value, source_value, overwrite)
        elif overwrite or key not in target:
            target[key] = clone(source_value)
    return target


def _can_merge(target: object, source: object) -> bool:
    return isinstance(target, MutableMapping) and isinstance(source, Mapping)
