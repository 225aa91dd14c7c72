"""Provider (docker-machine driver) names, alias translation, and create flags."""

from __future__ import annotations

import enum
from typing import Optional

from .config import DinghyConfig
from .errors import UnsupportedProviderError


class Provider(str, enum.Enum):
    VIRTUALBOX = 'virtualbox'
    VMWARE_FUSION = 'vmwarefusion'


_ALIASES: dict[str, Provider] = {
    'virtualbox': Provider.VIRTUALBOX,
    'vmware': Provider.VMWARE_FUSION,
    'vmware_fusion': Provider.VMWARE_FUSION,
    'vmwarefusion': Provider.VMWARE_FUSION,
    'vmware_desktop': Provider.VMWARE_FUSION,
}


# The two drivers spell the memory flag differently.
_MEMORY_FLAG: dict[Provider, str] = {
    Provider.VIRTUALBOX: 'memory',
    Provider.VMWARE_FUSION: 'memory-size',
}


def translate_provider(name: str | None) -> Optional[Provider]:
    """Map a user-facing provider name to a driver, or None if unknown.

    Matching is case sensitive.
    """
    if name is None:
        return None
    if isinstance(name, Provider):
        return name
    return _ALIASES.get(name)


def require_provider(name: str | None) -> Provider:
    provider = translate_provider(name)
    if provider is None:
        raise UnsupportedProviderError(str(name))
    return provider


def create_flags(provider: Provider, cfg: DinghyConfig) -> list[str]:
    """Driver-specific ``docker-machine create`` flags for ``cfg``."""
    prefix = f'--{provider.value}'
    memory_flag = _MEMORY_FLAG[provider]
    flags = [
        f'{prefix}-{memory_flag}',
        str(cfg.memory_mb),
        f'{prefix}-cpu-count',
        str(cfg.cpus),
        f'{prefix}-disk-size',
        str(cfg.disk_mb),
    ]
    if cfg.boot2docker_url:
        flags += [f'{prefix}-boot2docker-url', cfg.boot2docker_url]
    return flags
