"""VM lifecycle: create, start, stop, upgrade, and destroy via docker-machine."""

from __future__ import annotations

import sys

from loguru import logger

from ..config import DinghyConfig
from ..errors import ProvisioningError
from ..provider import Provider, create_flags, require_provider
from ..runtime import MACHINE_NAME, docker_machine_cmd, vboxmanage_cmd
from ..util import CmdResult, run_cmd
from .connect import write_ssh_config

log = logger


def _report_stderr(res: CmdResult) -> None:
    if res.stderr:
        print(res.stderr.rstrip(), file=sys.stderr)


def create_machine(cfg: DinghyConfig) -> None:
    """Create the VM and apply driver-specific setup.

    A failed create is not rolled back; docker-machine's own state is what
    remains.
    """
    provider = require_provider(cfg.provider)
    cmd = docker_machine_cmd(
        'create',
        '-d',
        provider.value,
        *create_flags(provider, cfg),
        MACHINE_NAME,
    )
    log.info('Creating {} VM {}', provider.value, MACHINE_NAME)
    res = run_cmd(cmd, capture=True)
    if res.code != 0:
        _report_stderr(res)
        raise ProvisioningError('There was an error creating the VM.')
    configure_new_machine(provider)


def configure_new_machine(provider: Provider) -> None:
    if provider is not Provider.VIRTUALBOX:
        return
    halt()
    # Force host DNS resolving so *.docker names resolve inside containers.
    res = run_cmd(
        vboxmanage_cmd(
            'modifyvm', MACHINE_NAME, '--natdnshostresolver1', 'on'
        ),
        capture=True,
    )
    if res.code != 0:
        _report_stderr(res)
        raise ProvisioningError('There was an error configuring the VM.')
    up()


def up() -> None:
    log.info('Starting VM {}', MACHINE_NAME)
    res = run_cmd(docker_machine_cmd('start', MACHINE_NAME), capture=True)
    if res.code != 0:
        _report_stderr(res)
        raise ProvisioningError(
            'There was an error bringing up the VM. Dinghy cannot continue.'
        )
    write_ssh_config()


def halt() -> CmdResult:
    log.info('Stopping VM {}', MACHINE_NAME)
    return run_cmd(docker_machine_cmd('stop', MACHINE_NAME), capture=False)


def upgrade() -> CmdResult:
    return run_cmd(docker_machine_cmd('upgrade', MACHINE_NAME), capture=False)


def destroy(*, force: bool = False) -> CmdResult:
    cmd = docker_machine_cmd('rm')
    if force:
        cmd.append('--force')
    cmd.append(MACHINE_NAME)
    log.info('Destroying VM {}', MACHINE_NAME)
    return run_cmd(cmd, capture=False)
