"""Command line for walking JSON and YAML documents.

Usage: leafwalker [options] COMMAND FILE [PATH] [VALUE]

Commands:
  each     print every leaf as ``k1 k2 : value``
  keys     print every leaf key path, joined by the separator
  values   print every leaf value
  fetch    print the value at PATH
  store    set PATH to VALUE (parsed as YAML) and write the document back
  delete   remove the mapping entry at PATH and write the document back
  exists   exit 0 if PATH exists, 1 otherwise

Walker errors are reported on stderr with exit status 2.
"""
from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging

import yaml

from leafwalker_lib.config import WalkerConfig, load_config
from leafwalker_lib.logging_config import configure_logging
from leafwalker_lib.serializer import Serializer, get_serializer, serializer_for_path
from leafwalker_lib.walker import LeafWalker, WalkerError
from leafwalker_lib.walker.interfaces import WalkerProtocol

logger = logging.getLogger(__name__)

PATH_COMMANDS = ("fetch", "store", "delete", "exists")


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="leafwalker", description="Walk the leaves of nested JSON/YAML documents.")
    p.add_argument("--config", type=Path, default=None, help="YAML config file (default: ./leafwalker.yml)")
    p.add_argument("--format", choices=["json", "yaml"], default=None, help="Document format (default: from suffix)")
    p.add_argument("--min-depth", type=int, default=None, help="Skip leaves with shorter key paths")
    p.add_argument("--separator", default=None, help="Key path separator (default: '.')")
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="command", required=True)
    for name in ("each", "keys", "values"):
        s = sub.add_parser(name)
        s.add_argument("file", type=Path)
    for name in PATH_COMMANDS:
        s = sub.add_parser(name)
        s.add_argument("file", type=Path)
        s.add_argument("path", help="Key path, e.g. 'or.0' (empty string for the root)")
        if name == "store":
            s.add_argument("value", help="New value, parsed as YAML")
    return p


def parse_key_path(text: str, separator: str) -> List[str]:
    """Split a textual key path. The empty string denotes the root."""
    if text == "":
        return []
    return text.split(separator)


def parse_value(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return text


def render(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def read_document(path: Path, serializer: Serializer) -> Any:
    with open(path, "rb") as f:
        return serializer.load(f.read())


def write_document(path: Path, serializer: Serializer, data: Any) -> None:
    # serialize first so a value the format cannot hold leaves no temp file behind
    payload = serializer.dump(data)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "wb") as f:
        f.write(payload)
        f.flush()
        os.fsync(f.fileno())
    tmp.replace(path)
    logger.info("Wrote %s", path)


def _cmd_each(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    while (entry := walker.each()) is not None:
        key_path, value = entry
        print(f"{' '.join(str(k) for k in key_path)} : {render(value)}")
    return 0


def _cmd_keys(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    for key_path in walker.keys():
        print(separator.join(str(k) for k in key_path))
    return 0


def _cmd_values(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    for value in walker.values():
        print(render(value))
    return 0


def _cmd_fetch(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    print(render(walker.fetch(parse_key_path(args.path, separator))))
    return 0


def _cmd_exists(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    return 0 if walker.exists(parse_key_path(args.path, separator)) else 1


def _cmd_store(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    walker.store(parse_key_path(args.path, separator), parse_value(args.value))
    return 0


def _cmd_delete(walker: WalkerProtocol, args: argparse.Namespace, separator: str) -> int:
    key_path = parse_key_path(args.path, separator)
    if not walker.exists(key_path):
        return 1
    print(render(walker.delete(key_path)))
    return 0


_COMMANDS: Dict[str, Callable[[WalkerProtocol, argparse.Namespace, str], int]] = {
    "each": _cmd_each,
    "keys": _cmd_keys,
    "values": _cmd_values,
    "fetch": _cmd_fetch,
    "exists": _cmd_exists,
    "store": _cmd_store,
    "delete": _cmd_delete,
}

# Commands whose success means the document changed on disk
_MUTATING = {"store", "delete"}


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(args.config, args.log_level)
    try:
        cfg: WalkerConfig = load_config(args.config)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 2

    separator = args.separator or cfg.separator
    fmt = args.format or cfg.format
    try:
        serializer = get_serializer(fmt) if fmt else serializer_for_path(args.file)
        data = read_document(args.file, serializer)
    except FileNotFoundError:
        print(f"Document not found: {args.file}", file=sys.stderr)
        return 2
    except (ValueError, yaml.YAMLError) as e:
        print(f"Cannot parse {args.file}: {e}", file=sys.stderr)
        return 2

    try:
        walker = LeafWalker(data, cfg, min_depth=args.min_depth)
        rc = _COMMANDS[args.command](walker, args, separator)
    except (WalkerError, ValueError, TypeError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if rc == 0 and args.command in _MUTATING:
        try:
            write_document(args.file, serializer, data)
        except (TypeError, ValueError, yaml.YAMLError, OSError) as e:
            print(f"Error: cannot write {args.file}: {e}", file=sys.stderr)
            return 2
    return rc


if __name__ == "__main__":
    sys.exit(main())
