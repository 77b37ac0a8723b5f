from __future__ import annotations

from collections.abc import Iterable


class ReadOnlyError(AttributeError):
    # Raised on assignment to an attribute previously marked read-only.
    def __init__(self, name: str, owner: object) -> None:
        super().__init__(f"Cannot assign to read only property '{name}' of {type(owner).__name__}")
        self.name = name


class ReadOnlyAttributes:
    """Per-instance attribute freezing.

    Names passed to :meth:`set_read_only` can still be read, but any later
    assignment or deletion raises :class:`ReadOnlyError`. The set only grows.
    """

    _read_only: frozenset[str] = frozenset()

    def set_read_only(self, names: str | Iterable[str]) -> None:
        if isinstance(names, str):
            names = [names]
        # Bypass __setattr__ so the bookkeeping field itself stays writable here.
        object.__setattr__(self, "_read_only", self._read_only | frozenset(names))

    def is_read_only(self, name: str) -> bool:
        return name in self._read_only

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._read_only or name == "_read_only":
            raise ReadOnlyError(name, self)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._read_only or name == "_read_only":
            raise ReadOnlyError(name, self)
        super().__delattr__(name)
