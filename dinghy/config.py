from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path

from .util import expand

DEFAULT_PROVIDER = 'virtualbox'


@dataclass
class DinghyConfig:
    provider: str = DEFAULT_PROVIDER
    memory_mb: int = 2048
    cpus: int = 1
    disk_mb: int = 20000
    boot2docker_url: str = ''
    verbosity: int = 1

    def expanded_paths(self) -> 'DinghyConfig':
        # Local ISO paths are allowed, so expand them like any other path.
        if self.boot2docker_url and '://' not in self.boot2docker_url:
            self.boot2docker_url = expand(self.boot2docker_url)
        return self


def _toml_escape(s: str) -> str:
    return s.replace('\\', '\\\\').replace('"', '\\"')


def dump_toml(cfg: DinghyConfig) -> str:
    lines: list[str] = []
    for k, v in asdict(cfg).items():
        if isinstance(v, bool):
            lines.append(f'{k} = {"true" if v else "false"}')
        elif isinstance(v, int):
            lines.append(f'{k} = {v}')
        else:
            lines.append(f'{k} = "{_toml_escape(str(v))}"')
    return '\n'.join(lines).rstrip() + '\n'


def load(path: Path) -> DinghyConfig:
    raw = tomllib.loads(path.read_text(encoding='utf-8'))
    cfg = DinghyConfig()
    for k, v in raw.items():
        if hasattr(cfg, k):
            setattr(cfg, k, v)
    return cfg


def load_or_default(path: Path) -> DinghyConfig:
    if not path.exists():
        return DinghyConfig()
    return load(path)


def save(path: Path, cfg: DinghyConfig) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_toml(cfg), encoding='utf-8')
