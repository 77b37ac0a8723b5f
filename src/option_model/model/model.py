from __future__ import annotations

from option_model.model.mixins import TypedGetters
from option_model.model.parent import DynamicParent, ParentResolver, ParentSource, parent_source_for
from option_model.model.path import PathLike, child, parse_path, walk_path
from option_model.model.readonly import ReadOnlyAttributes
from option_model.util.merge import clone, merge


class Model(ReadOnlyAttributes, TypedGetters):
    """View over one node of an option tree plus its fallback chain.

    Reads look in ``option`` first and escalate to the parent model on a miss.
    ``get`` walks the whole path locally before asking the parent for the same
    path; ``get_shallow`` probes exactly one key per level. Sub-models from
    ``get_model`` alias the underlying nested data and fall back to the
    analogous sub-model of the parent, so inheritance composes at any depth.

    ``root_model`` is an opaque handle to the top of the hierarchy; it is
    carried to every derived model and never read here.
    """

    def __init__(
        self,
        option: object = None,
        parent_model: Model | None = None,
        root_model: object = None,
    ) -> None:
        self.option = option
        self._parent: ParentSource = parent_source_for(parent_model)
        self._root_model = root_model

    @property
    def parent_model(self) -> Model | None:
        return self._parent.model

    @property
    def root_model(self) -> object:
        return self._root_model

    def __repr__(self) -> str:
        return f"{type(self).__name__}(option={self.option!r})"

    def get(self, path: PathLike | None = None, ignore_parent: bool = False) -> object | None:
        if path is None:
            return self.option
        keys = self.parse_path(path)
        value = walk_path(self.option, keys)
        if value is None and not ignore_parent:
            parent = self._resolve_parent(keys)
            if parent is not None:
                # The parent resolves the identical full path against its own tree.
                value = parent.get(keys)
        return value

    def get_shallow(self, key: str, ignore_parent: bool = False) -> object | None:
        value = child(self.option, key)
        if value is None and not ignore_parent:
            parent = self._resolve_parent([key])
            if parent is not None:
                value = parent.get_shallow(key)
        return value

    def get_model(self, path: PathLike | None = None, parent_model: Model | None = None) -> Model:
        keys = self.parse_path(path)
        sub_option = self.option if keys is None else walk_path(self.option, keys)
        if parent_model is None:
            parent = self._resolve_parent(keys)
            if parent is not None:
                parent_model = parent.get_model(keys)
        return Model(sub_option, parent_model, self._root_model)

    def is_empty(self) -> bool:
        return self.option is None

    def restore_data(self) -> None:
        # Hook for subclasses caching state derived from option.
        pass

    def merge_option(self, option: object) -> None:
        # In-place deep merge; models aliasing the same subtree see the change.
        merged = merge(self.option, option, True)
        if merged is not self.option:
            # Empty or scalar option: adopt a copy of the patch.
            self.option = merged

    def clone(self, detached: bool = False) -> Model:
        # Deep copy of option; parent, root and resolver hook are shared unless detached.
        copied = type(self)(clone(self.option))
        if not detached:
            copied._parent = self._parent
            copied._root_model = self._root_model
        return copied

    def customize_get_parent(self, resolver: ParentResolver) -> None:
        self._parent = DynamicParent(resolver, self._parent.model)

    def parse_path(self, path: PathLike | None) -> list[str] | None:
        return parse_path(path)

    def _resolve_parent(self, keys: list[str] | None) -> Model | None:
        return self._parent.resolve(keys)
