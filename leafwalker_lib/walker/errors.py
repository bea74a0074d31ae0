"""
Walker errors

Every failure raised by the walker derives from `WalkerError`. The concrete
classes also derive from the closest builtin so callers that only know about
`TypeError` / `LookupError` / `RuntimeError` still catch them.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class WalkerError(Exception):
    """Base class for leaf walker failures."""


class TypeLookupError(WalkerError, TypeError):
    """Raised when a key is looked up in a value that is neither a sequence nor a mapping."""

    def __init__(self, key: Any, value: Any, message: Optional[str] = None) -> None:
        self.key = key
        self.value_type = type(value).__name__
        super().__init__(message or f"cannot look up key ({key!r}) in invalid type ({self.value_type})")


class MissingIntermediateError(WalkerError, LookupError):
    """Raised by `store` when the parent container of the target does not exist."""

    def __init__(self, key_path: Sequence[Any]) -> None:
        self.key_path = list(key_path)
        super().__init__(f"cannot autovivify arbitrarily: no container at {self.key_path!r}")


class InvalidOperationError(WalkerError):
    """Raised for operations the walker declines to perform (e.g. deleting from a sequence)."""


class InternalConsistencyError(WalkerError, RuntimeError):
    """Raised when the cursor primitive is asked to enumerate a leaf."""
