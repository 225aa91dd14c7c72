"""Top-level modal CLI wiring, argv normalization, and logging setup."""

from __future__ import annotations

import os
import sys

import scriptconfig as scfg
from loguru import logger

from ..util import shell_join
from ._common import _cfg_path, _load_cfg, log
from .machine import (
    CreateCLI,
    DestroyCLI,
    HaltCLI,
    IPCLI,
    MountCLI,
    SSHCLI,
    SSHConfigCLI,
    StatusCLI,
    UpCLI,
    UpgradeCLI,
)


class DinghyModalCLI(scfg.ModalCLI):
    """Docker development VM manager built on docker-machine."""

    create = CreateCLI
    up = UpCLI
    halt = HaltCLI
    destroy = DestroyCLI
    upgrade = UpgradeCLI
    status = StatusCLI
    ip = IPCLI
    ssh = SSHCLI
    ssh_config = SSHConfigCLI
    mount = MountCLI


def main(argv: list[str] | None = None) -> None:
    verbosity = 1
    config_value = None
    if argv is None:
        argv = sys.argv[1:]
    argv = _normalize_argv(argv)
    if '--config' in argv:
        try:
            config_value = argv[argv.index('--config') + 1]
        except IndexError:
            pass
    try:
        if config_value is not None or _cfg_path(None).exists():
            verbosity = _load_cfg(config_value).verbosity
    except Exception:
        verbosity = 1

    explicit_verbose = _count_verbose(argv)
    _setup_logging(explicit_verbose, verbosity)

    try:
        rc = DinghyModalCLI.main(argv=argv, _noexit=True)
    except Exception as ex:
        print(f'ERROR: {ex}', file=sys.stderr)
        log.error('Unhandled dinghy error: {}', ex)
        sys.exit(2)

    if any(flag in argv for flag in ('-h', '--help')):
        sys.exit(0)
    if isinstance(rc, int):
        sys.exit(rc)
    sys.exit(0)


def _setup_logging(args_verbose: int, cfg_verbosity: int) -> None:
    logger.remove()
    effective_verbosity = args_verbose if args_verbose > 0 else cfg_verbosity
    level = 'WARNING'
    if effective_verbosity == 1:
        level = 'INFO'
    elif effective_verbosity >= 2:
        level = 'DEBUG'
    colorize = sys.stderr.isatty() and os.getenv('NO_COLOR') is None
    logger.add(
        sys.stderr,
        level=level,
        colorize=colorize,
        format='<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>',
    )
    log.debug(
        'Logging configured at {} (effective_verbosity={}, colorize={})',
        level,
        effective_verbosity,
        colorize,
    )


def _normalize_argv(argv: list[str]) -> list[str]:
    """Normalize hyphenated spellings and fold `ssh <words>` into --command."""
    if len(argv) >= 1 and argv[0] == 'ssh-config':
        return ['ssh_config', *argv[1:]]
    if len(argv) >= 2 and argv[0] == 'ssh' and not argv[1].startswith('-'):
        return ['ssh', '--command', shell_join(argv[1:])]
    return argv


def _count_verbose(argv: list[str]) -> int:
    count = 0
    for item in argv:
        if item == '--verbose':
            count += 1
        elif item.startswith('-') and not item.startswith('--'):
            short = item[1:]
            if short and set(short) <= {'v'}:
                count += len(short)
    return count
