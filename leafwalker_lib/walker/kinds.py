"""Type inspection helpers.

Values are classified into a closed set of kinds: mappings, sequences and
leaves. Strings and byte strings are sequences to Python but are leaves here.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


class Kind(Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    LEAF = "leaf"


def kind_of(value: Any) -> Kind:
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return Kind.SEQUENCE
    return Kind.LEAF


def is_mapping(value: Any) -> bool:
    return kind_of(value) is Kind.MAPPING


def is_sequence(value: Any) -> bool:
    return kind_of(value) is Kind.SEQUENCE


def is_container(value: Any) -> bool:
    return kind_of(value) is not Kind.LEAF


def is_leaf(value: Any) -> bool:
    return kind_of(value) is Kind.LEAF

