from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

from leafwalker_lib.config import DEFAULT_CONFIG_PATH


def configure_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for the command line.

    Establishes an early NOTSET basic config so the config file can be read,
    then reconfigures the root logger to the level named by `level`, or the
    `log_level` key of the YAML config, or WARNING. Returns a module logger
    for the caller.
    """
    # Minimal early config so other imports can emit without error
    logging.basicConfig(level=logging.NOTSET, format='%(asctime)s INFO %(message)s')
    DEFAULT_LOG_LEVEL = logging.WARNING

    _lvl = level
    cfg_path = config_path or DEFAULT_CONFIG_PATH
    if _lvl is None and cfg_path.exists():
        try:
            with cfg_path.open('r', encoding='utf-8') as _f:
                _cfg = yaml.safe_load(_f) or {}
                _lvl = _cfg.get('log_level') if isinstance(_cfg, dict) else None
        except yaml.YAMLError:
            # If config parse fails, fall back to default level
            _lvl = None
    if isinstance(_lvl, str):
        _numeric = getattr(logging, _lvl.upper(), None)
        if isinstance(_numeric, int):
            DEFAULT_LOG_LEVEL = _numeric

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.debug("Log level set to: %s", logging.getLevelName(DEFAULT_LOG_LEVEL))

    return logger
