"""Walk the leaves of arbitrarily deep nested data structures."""

from leafwalker_lib.walker import (
    LeafWalker,
    WalkerView,
    WalkerError,
    TypeLookupError,
    MissingIntermediateError,
    InvalidOperationError,
    InternalConsistencyError,
)

__version__ = "0.1.0"

__all__ = [
    "LeafWalker",
    "WalkerView",
    "WalkerError",
    "TypeLookupError",
    "MissingIntermediateError",
    "InvalidOperationError",
    "InternalConsistencyError",
]
