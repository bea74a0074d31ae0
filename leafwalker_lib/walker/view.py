from typing import Any, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .walker import LeafWalker


class WalkerView:
    """A proxy exposing chained indexing over the data wrapped by a walker.

    ``view['a'][0]`` returns a new view at the extended key path; assignment,
    deletion and ``in`` are forwarded to the walker's `store`, `delete` and
    `exists`. Call `get()` to read the value at the view's own path.
    """

    def __init__(self, walker: 'LeafWalker', path: Sequence[Any] = ()) -> None:
        self._walker = walker
        self._path = tuple(path)

    @property
    def path(self) -> list:
        return list(self._path)

    def _full_path(self, key: Any) -> list:
        return list(self._path) + [key]

    def __getitem__(self, key: Any) -> 'WalkerView':
        return WalkerView(self._walker, self._full_path(key))

    def __setitem__(self, key: Any, value: Any) -> None:
        self._walker.store(self._full_path(key), value)

    def __delitem__(self, key: Any) -> None:
        self._walker.delete(self._full_path(key))

    def __contains__(self, key: Any) -> bool:
        return self._walker.exists(self._full_path(key))

    def get(self) -> Any:
        return self._walker.fetch(self._path)

    def set(self, value: Any) -> Any:
        return self._walker.store(self._path, value)

    def delete(self) -> Any:
        return self._walker.delete(self._path)

    def exists(self) -> bool:
        return self._walker.exists(self._path)

    def __repr__(self) -> str:
        try:
            val = self.get()
        except Exception:
            val = '<unreadable>'
        return f"WalkerView(path={list(self._path)}, value={val!r})"
