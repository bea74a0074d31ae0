"""Leaf walker core: traversal engine and key-path accessors."""

from .errors import (
    WalkerError,
    TypeLookupError,
    MissingIntermediateError,
    InvalidOperationError,
    InternalConsistencyError,
)
from .kinds import Kind, kind_of, is_mapping, is_sequence, is_container, is_leaf
from .walker import LeafWalker
from .view import WalkerView

__all__ = [
    "LeafWalker",
    "WalkerView",
    "Kind",
    "kind_of",
    "is_mapping",
    "is_sequence",
    "is_container",
    "is_leaf",
    "WalkerError",
    "TypeLookupError",
    "MissingIntermediateError",
    "InvalidOperationError",
    "InternalConsistencyError",
]
