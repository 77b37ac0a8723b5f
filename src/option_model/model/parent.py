from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from option_model.model.model import Model

# Resolver receives the normalized key list being read, never the raw dotted string:
# get() and get_model() pass the parsed keys (None for a path-less get_model()),
# get_shallow(key) passes [key]. It returns the model to fall back to, or None.
ParentResolver = Callable[[list[str] | None], "Model | None"]


@dataclass(frozen=True, slots=True)
class NoParent:
    # Root of a hierarchy: nothing to fall back to.
    @property
    def model(self) -> Model | None:
        return None

    def resolve(self, path: list[str] | None) -> Model | None:
        return None


@dataclass(frozen=True, slots=True)
class FixedParent:
    # Positional fallback: the same parent for every path.
    parent: Model

    @property
    def model(self) -> Model | None:
        return self.parent

    def resolve(self, path: list[str] | None) -> Model | None:
        return self.parent


@dataclass(frozen=True, slots=True)
class DynamicParent:
    # Caller-supplied fallback chosen per path; the stored parent is kept for parent_model.
    resolver: ParentResolver
    fixed: Model | None = None

    @property
    def model(self) -> Model | None:
        return self.fixed

    def resolve(self, path: list[str] | None) -> Model | None:
        return self.resolver(path)


ParentSource = Union[NoParent, FixedParent, DynamicParent]


def parent_source_for(parent_model: Model | None) -> ParentSource:
    if parent_model is None:
        return NoParent()
    return FixedParent(parent_model)
