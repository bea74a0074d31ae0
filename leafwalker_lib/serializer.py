from pathlib import Path
from typing import Any, Protocol
import json
import yaml


class Serializer(Protocol):
    """Serialize/deserialize documents read and written by the command line.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    """

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class JSONSerializer:
    """Serializer using JSON (text). Caller must ensure values are JSON-serializable."""

    def dump(self, value: Any) -> bytes:
        return (json.dumps(value, indent=2) + "\n").encode("utf-8")

    def load(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, sort_keys=False).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8"))


_SERIALIZERS = {
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
}

_SUFFIXES = {
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
}


def get_serializer(name: str) -> Serializer:
    try:
        return _SERIALIZERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown serializer {name!r}; expected one of {sorted(_SERIALIZERS)}") from None


def serializer_for_path(path: Path) -> Serializer:
    """Pick a serializer from the file suffix. Unknown suffixes fall back to YAML,
    which also reads JSON documents."""
    return get_serializer(_SUFFIXES.get(Path(path).suffix.lower(), "yaml"))
