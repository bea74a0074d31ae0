"""Iteration frames used by the leaf walker.

A frame owns the enumeration cursor for one container. Cursor state never
lives on the container itself, so two walkers (or two passes of one walker)
over the same data do not interfere.
"""
from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from .errors import InternalConsistencyError
from .kinds import Kind, kind_of

Entry = Tuple[Any, Any]


class Frame:
    """A container plus its current enumeration cursor.

    For sequences the cursor is the next index to emit. For mappings it is an
    iterator over the mapping's items, created lazily on the first advance.
    """

    __slots__ = ("container", "kind", "next_index", "_items")

    def __init__(self, container: Any) -> None:
        self.container = container
        self.kind = kind_of(container)
        self.next_index = 0
        self._items: Optional[Iterator[Entry]] = None

    def advance(self) -> Optional[Entry]:
        """Return the next `(key, value)` entry, or None when exhausted."""
        if self.kind is Kind.SEQUENCE:
            index = self.next_index
            if index >= len(self.container):
                return None
            self.next_index = index + 1
            return index, self.container[index]
        if self.kind is Kind.MAPPING:
            if self._items is None:
                self._items = iter(self.container.items())
            return next(self._items, None)
        raise InternalConsistencyError(
            f"cannot enumerate non-mapping/non-sequence value of type {type(self.container).__name__}"
        )

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"Frame(kind={self.kind.value}, next_index={self.next_index})"
