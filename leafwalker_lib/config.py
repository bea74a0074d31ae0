"""Walker configuration.

Settings are read from an optional YAML file (``leafwalker.yml`` in the
working directory by default). A missing file yields the defaults.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
import logging

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('leafwalker.yml')


@dataclass
class WalkerConfig:
    # Leaves with a shorter key path are not yielded by each/keys/values
    min_depth: int = 0
    # Separator used when parsing key paths given as text
    separator: str = "."
    log_level: str = "WARNING"
    # Document format for the command line; None picks it from the file suffix
    format: Optional[str] = None


def load_config(path: Optional[Path] = None) -> WalkerConfig:
    """Load a `WalkerConfig` from YAML.

    Unknown keys are logged and ignored. Raises `ValueError` if the document
    is not a mapping.
    """
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug('No config file at %s, using defaults', cfg_path)
        return WalkerConfig()

    with cfg_path.open('r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {cfg_path} must contain a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(WalkerConfig)}
    for key in raw.keys() - known:
        logger.warning('Ignoring unknown config key %r in %s', key, cfg_path)
    cfg = WalkerConfig(**{k: v for k, v in raw.items() if k in known})
    logger.debug('Loaded config from %s: %s', cfg_path, cfg)
    return cfg
