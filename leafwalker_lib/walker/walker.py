"""Leaf walker: resumable depth-first enumeration of nested data.

`LeafWalker` wraps a root value made of nested mappings and sequences and
exposes two groups of operations:

- resumable enumeration: `each`, plus `keys`, `values` and `items` built on it;
- key-path access: `fetch`, `store`, `delete`, `exists`.

The walker holds a reference to the root and never copies it; mutations made
through `store` and `delete` are visible to the owner of the data.

Example::

    data = {'a': 'hash', 'or': ['array', 'ref'], 'with': {'arbitrary': 'nesting'}}
    walker = LeafWalker(data)
    while (entry := walker.each()) is not None:
        key_path, value = entry
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Sequence, Tuple, TYPE_CHECKING

from .accessor import KeyPathAccessor
from .frames import Frame
from .kinds import is_container

if TYPE_CHECKING:
    from leafwalker_lib.config import WalkerConfig
    from .view import WalkerView

logger = logging.getLogger(__name__)

KeyPath = List[Any]
Leaf = Tuple[KeyPath, Any]


class LeafWalker:
    def __init__(self, root: Any, config: Optional['WalkerConfig'] = None, *, min_depth: Optional[int] = None) -> None:
        if min_depth is None:
            min_depth = config.min_depth if config is not None else 0
        if min_depth < 0:
            raise ValueError(f"min_depth must be >= 0, got {min_depth}")
        self._root = root
        self._min_depth = min_depth
        self._accessor = KeyPathAccessor()
        self._frames: List[Frame] = []
        self._key_stack: KeyPath = []

    @property
    def root(self) -> Any:
        return self._root

    @property
    def min_depth(self) -> int:
        return self._min_depth

    @property
    def in_progress(self) -> bool:
        """True while a traversal has been started and not yet exhausted."""
        return bool(self._frames)

    # -- enumeration -----------------------------------------------------

    def reset(self) -> None:
        """Abandon any partial traversal; the next `each` starts from the root."""
        if self._frames:
            logger.debug("Discarding partial traversal at depth %d", len(self._key_stack))
        self._frames.clear()
        self._key_stack.clear()

    def each(self) -> Optional[Leaf]:
        """Advance by one leaf and return ``(key_path, value)``.

        Returns None once every leaf has been visited; the walker is then
        ready to start a fresh pass on the next call. A root that is itself
        a leaf has no key path into it and yields nothing.
        """
        if not self._frames:
            if not is_container(self._root):
                return None
            self._frames.append(Frame(self._root))

        while self._frames:
            entry = self._frames[-1].advance()
            if entry is None:
                self._frames.pop()
                # the root frame has no incoming key
                if self._key_stack:
                    self._key_stack.pop()
                continue
            key, value = entry
            if is_container(value):
                self._frames.append(Frame(value))
                self._key_stack.append(key)
                continue
            if len(self._key_stack) + 1 < self._min_depth:
                continue
            return self._key_stack + [key], value

        logger.debug("Traversal exhausted")
        return None

    def keys(self) -> List[KeyPath]:
        """Return the key paths of all leaves, in traversal order."""
        return [key_path for key_path, _ in self.items()]

    def values(self) -> List[Any]:
        """Return all leaf values, in traversal order."""
        return [value for _, value in self.items()]

    def items(self) -> List[Leaf]:
        """Return ``(key_path, value)`` for every leaf after a fresh pass."""
        self.reset()
        collected: List[Leaf] = []
        while (entry := self.each()) is not None:
            collected.append(entry)
        return collected

    def __iter__(self) -> Iterator[Leaf]:
        self.reset()
        while (entry := self.each()) is not None:
            yield entry

    # -- key-path access -------------------------------------------------

    def fetch(self, key_path: Sequence[Any]) -> Any:
        """Return the value at `key_path`; the empty path returns the root.

        Raises `TypeLookupError` when a key has to be looked up in a leaf.
        Absent keys and out-of-range indices read as None.
        """
        return self._accessor.fetch(self._root, key_path)

    def store(self, key_path: Sequence[Any], value: Any) -> Any:
        """Set the value at `key_path` and return it.

        The parent container must already exist; intermediate containers are
        never created (`MissingIntermediateError`).
        """
        return self._accessor.store(self._root, key_path, value)

    def delete(self, key_path: Sequence[Any]) -> Any:
        """Delete a mapping entry and return its previous value (None if absent).

        Deleting from a sequence raises `InvalidOperationError`.
        """
        return self._accessor.delete(self._root, key_path)

    def exists(self, key_path: Sequence[Any]) -> bool:
        return self._accessor.exists(self._root, key_path)

    def view(self) -> 'WalkerView':
        from .view import WalkerView
        return WalkerView(self)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"LeafWalker(root={type(self._root).__name__}, min_depth={self._min_depth})"
