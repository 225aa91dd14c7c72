from __future__ import annotations

from pathlib import Path

import scriptconfig as scfg
from loguru import logger

from ..config import DinghyConfig, load_or_default
from ..runtime import preferences_path

log = logger


class _BaseCommand(scfg.DataConfig):
    """Base options shared by all commands."""

    config = scfg.Value(
        None,
        type=str,
        help='Path to preferences TOML (default: ~/.dinghy/preferences.toml).',
    )
    verbose = scfg.Value(
        0,
        short_alias=['v'],
        isflag='counter',
        help='Increase verbosity (-v, -vv).',
    )


def _cfg_path(p: str | None) -> Path:
    if p:
        return Path(p).expanduser().resolve()
    return preferences_path()


def _load_cfg(config_path: str | None) -> DinghyConfig:
    path = _cfg_path(config_path)
    cfg = load_or_default(path).expanded_paths()
    log.debug('Loaded preferences from {} (exists={})', path, path.exists())
    return cfg
