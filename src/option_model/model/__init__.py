from .mixins import TypedGetters, mixin
from .model import Model
from .parent import DynamicParent, FixedParent, NoParent, ParentResolver, ParentSource
from .path import PathLike, parse_path, walk_path
from .readonly import ReadOnlyAttributes, ReadOnlyError

__all__ = [
    "Model",
    "ReadOnlyAttributes",
    "ReadOnlyError",
    "TypedGetters",
    "mixin",
    "NoParent",
    "FixedParent",
    "DynamicParent",
    "ParentResolver",
    "ParentSource",
    "PathLike",
    "parse_path",
    "walk_path",
]
