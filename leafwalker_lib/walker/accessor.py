import operator
import re
from collections.abc import Hashable
from typing import Any, Sequence, MutableMapping, MutableSequence, Optional, Protocol, Tuple

from .errors import InvalidOperationError, MissingIntermediateError, TypeLookupError
from .kinds import Kind, kind_of

_INT_KEY = re.compile(r"[+-]?\d+")


class ValueAccessor(Protocol):
    """Protocol to read and mutate one level of an in-memory container."""

    def lookup(self, container: Any, key: Any) -> Any: ...

    def assign(self, container: Any, key: Any, new: Any) -> Any: ...

    def remove(self, container: Any, key: Any) -> Any: ...

    def contains(self, container: Any, key: Any) -> bool: ...


def to_index(container: Any, key: Any) -> int:
    """Coerce `key` into a sequence index.

    Integers and objects implementing ``__index__`` are used as-is; strings of
    an optionally signed integer are converted so that key paths parsed from
    text can address sequences.
    """
    try:
        return operator.index(key)
    except TypeError:
        pass
    if isinstance(key, str) and _INT_KEY.fullmatch(key.strip()):
        return int(key)
    raise TypeLookupError(
        key, container,
        f"cannot use key ({key!r}) as an index into {type(container).__name__}",
    )


def _check_hashable(container: Any, key: Any) -> None:
    if not isinstance(key, Hashable):
        raise TypeLookupError(
            key, container,
            f"cannot use unhashable key ({key!r}) in {type(container).__name__}",
        )


class MappingAccessor:
    """Accessor for mapping containers. Absent keys read as None."""

    def lookup(self, container: Any, key: Any) -> Any:
        _check_hashable(container, key)
        return container.get(key)

    def assign(self, container: Any, key: Any, new: Any) -> Any:
        if not isinstance(container, MutableMapping):
            raise InvalidOperationError(f"cannot store into immutable mapping {type(container).__name__}")
        _check_hashable(container, key)
        container[key] = new
        return new

    def remove(self, container: Any, key: Any) -> Any:
        if not isinstance(container, MutableMapping):
            raise InvalidOperationError(f"cannot delete from immutable mapping {type(container).__name__}")
        _check_hashable(container, key)
        return container.pop(key, None)

    def contains(self, container: Any, key: Any) -> bool:
        _check_hashable(container, key)
        return key in container


class SequenceAccessor:
    """Accessor for sequence containers using integer indices.

    Out-of-range reads yield None. Writes past the end grow the sequence and
    fill the gap with None.
    """

    def lookup(self, container: Any, key: Any) -> Any:
        index = to_index(container, key)
        if -len(container) <= index < len(container):
            return container[index]
        return None

    def assign(self, container: Any, key: Any, new: Any) -> Any:
        index = to_index(container, key)
        if not isinstance(container, MutableSequence):
            raise InvalidOperationError(f"cannot store into immutable sequence {type(container).__name__}")
        if index >= len(container):
            container.extend([None] * (index - len(container)))
            container.append(new)
        else:
            container[index] = new
        return new

    def remove(self, container: Any, key: Any) -> Any:
        raise InvalidOperationError("cannot delete() from a sequence leaf")

    def contains(self, container: Any, key: Any) -> bool:
        index = to_index(container, key)
        return -len(container) <= index < len(container)


class KeyPathAccessor:
    """Navigate nested mappings and sequences by key path.

    Dispatches each step to `MappingAccessor` or `SequenceAccessor` depending
    on the kind of the current container. Intermediate containers are never
    created.
    """

    def __init__(self) -> None:
        self._accessors = {
            Kind.MAPPING: MappingAccessor(),
            Kind.SEQUENCE: SequenceAccessor(),
        }

    def _accessor_for(self, container: Any, key: Any) -> ValueAccessor:
        accessor = self._accessors.get(kind_of(container))
        if accessor is None:
            raise TypeLookupError(key, container)
        return accessor

    def fetch(self, root: Any, path: Sequence[Any]) -> Any:
        cur = root
        for key in path:
            cur = self._accessor_for(cur, key).lookup(cur, key)
        return cur

    def _twig(self, root: Any, path: Sequence[Any]) -> Tuple[Optional[Any], Any]:
        """Split `path` and return ``(parent container or None, last key)``.

        None is returned for the parent when any container along the prefix is
        missing. A leaf found where a container is required still raises.
        """
        if not path:
            raise InvalidOperationError("key path must not be empty")
        *prefix, last = path
        cur = root
        for key in prefix:
            if cur is None:
                return None, last
            cur = self._accessor_for(cur, key).lookup(cur, key)
        if cur is None:
            return None, last
        return cur, last

    def store(self, root: Any, path: Sequence[Any], new: Any) -> Any:
        twig, last = self._twig(root, path)
        if twig is None:
            raise MissingIntermediateError(path[:-1])
        return self._accessor_for(twig, last).assign(twig, last, new)

    def delete(self, root: Any, path: Sequence[Any]) -> Any:
        twig, last = self._twig(root, path)
        if twig is None:
            return None
        return self._accessor_for(twig, last).remove(twig, last)

    def exists(self, root: Any, path: Sequence[Any]) -> bool:
        if not path:
            return True
        twig, last = self._twig(root, path)
        if twig is None:
            return False
        return self._accessor_for(twig, last).contains(twig, last)
