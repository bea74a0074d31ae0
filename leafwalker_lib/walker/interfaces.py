from typing import Protocol, Any, List, Optional, Sequence, Tuple, runtime_checkable


@runtime_checkable
class WalkerProtocol(Protocol):
    """Leaf walker protocol mirroring `leafwalker_lib.walker.LeafWalker`.

    Implementations should follow the semantics documented on `LeafWalker`
    (None from `each` when exhausted, no autovivification on `store`,
    `InvalidOperationError` when deleting from a sequence, etc.).
    """

    def each(self) -> Optional[Tuple[List[Any], Any]]: ...

    def reset(self) -> None: ...

    def keys(self) -> List[List[Any]]: ...

    def values(self) -> List[Any]: ...

    def fetch(self, key_path: Sequence[Any]) -> Any: ...

    def store(self, key_path: Sequence[Any], value: Any) -> Any: ...

    def delete(self, key_path: Sequence[Any]) -> Any: ...

    def exists(self, key_path: Sequence[Any]) -> bool: ...
