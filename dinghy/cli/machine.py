"""CLI commands for VM lifecycle, SSH access, and NFS mounting."""

from __future__ import annotations

import scriptconfig as scfg

from ..config import save
from ..errors import CommandFailed, DinghyError, UnsupportedProviderError
from ..machine import (
    create_machine,
    destroy,
    halt,
    inspect_machine,
    machine_created,
    machine_running,
    mount,
    ssh,
    ssh_config as mk_ssh_config,
    ssh_handoff,
    up,
    upgrade,
)
from ..nfs import DEFAULT_NFS_PORT, NfsMount
from ..provider import translate_provider
from ..status import render_status
from ._common import _BaseCommand, _cfg_path, _load_cfg, log


class CreateCLI(_BaseCommand):
    """Create the VM, then start it (virtualbox) and write the SSH config."""

    provider = scfg.Value(
        None,
        type=str,
        help='virtualbox, or vmware/vmware_fusion/vmwarefusion/vmware_desktop.',
    )
    memory_mb = scfg.Value(None, type=int, help='VM memory in MB.')
    cpus = scfg.Value(None, type=int, help='Number of VM CPUs.')
    disk_mb = scfg.Value(None, type=int, help='VM disk size in MB.')
    boot2docker_url = scfg.Value(
        None, type=str, help='Custom boot2docker ISO URL or local path.'
    )

    @classmethod
    def main(cls, argv=True, **kwargs):
        args = cls.cli(argv=argv, data=kwargs)
        cfg_path = _cfg_path(args.config)
        cfg = _load_cfg(args.config)
        if args.provider is not None:
            cfg.provider = str(args.provider)
        if args.memory_mb is not None:
            cfg.memory_mb = int(args.memory_mb)
        if args.cpus is not None:
            cfg.cpus = int(args.cpus)
        if args.disk_mb is not None:
            cfg.disk_mb = int(args.disk_mb)
        if args.boot2docker_url is not None:
            cfg.boot2docker_url = str(args.boot2docker_url)
        cfg.expanded_paths()
        provider = translate_provider(cfg.provider)
        if provider is None:
            raise UnsupportedProviderError(cfg.provider)
        cfg.provider = provider.value
        if machine_created():
            raise DinghyError(
                'The VM already exists. Run `dinghy up` to start it, '
                'or `dinghy destroy` first.'
            )
        create_machine(cfg)
        save(cfg_path, cfg)
        log.debug('Saved preferences to {}', cfg_path)
        return 0


class UpCLI(_BaseCommand):
    """Start the VM and regenerate the SSH config."""

    mount = scfg.Value(
        False, isflag=True, help='Mount the host NFS export after starting.'
    )

    @classmethod
    def main(cls, argv=True, **kwargs):
        args = cls.cli(argv=argv, data=kwargs)
        if not machine_created():
            raise DinghyError('The VM does not exist. Run `dinghy create` first.')
        up()
        if args.mount:
            mount(NfsMount())
        return 0


class HaltCLI(_BaseCommand):
    """Stop the VM."""

    @classmethod
    def main(cls, argv=True, **kwargs):
        cls.cli(argv=argv, data=kwargs)
        halt()
        return 0


class DestroyCLI(_BaseCommand):
    """Remove the VM and its docker-machine state."""

    force = scfg.Value(
        False, isflag=True, help='Pass --force to docker-machine rm.'
    )

    @classmethod
    def main(cls, argv=True, **kwargs):
        args = cls.cli(argv=argv, data=kwargs)
        destroy(force=bool(args.force))
        return 0


class UpgradeCLI(_BaseCommand):
    """Upgrade the boot2docker image inside the VM."""

    @classmethod
    def main(cls, argv=True, **kwargs):
        cls.cli(argv=argv, data=kwargs)
        upgrade()
        return 0


class StatusCLI(_BaseCommand):
    """Report VM state, network address, and SSH config presence."""

    @classmethod
    def main(cls, argv=True, **kwargs):
        cls.cli(argv=argv, data=kwargs)
        print(render_status())
        return 0


class IPCLI(_BaseCommand):
    """Print the VM IP address."""

    @classmethod
    def main(cls, argv=True, **kwargs):
        cls.cli(argv=argv, data=kwargs)
        if not machine_created():
            raise DinghyError('The VM does not exist.')
        print(inspect_machine().require_ip_address())
        return 0


class SSHCLI(_BaseCommand):
    """SSH into the VM, or run a single command when one is given."""

    command = scfg.Value(
        '', type=str, help='Command to run instead of a shell.'
    )

    @classmethod
    def main(cls, argv=True, **kwargs):
        args = cls.cli(argv=argv, data=kwargs)
        command = (args.command or '').strip()
        if not command:
            ssh_handoff()
            return 0
        try:
            ssh(command)
        except CommandFailed as ex:
            log.debug('{} (exitstatus={})', ex, ex.exitstatus)
            return ex.exitstatus
        return 0


class SSHConfigCLI(_BaseCommand):
    """Print the SSH config stanza for the VM."""

    @classmethod
    def main(cls, argv=True, **kwargs):
        cls.cli(argv=argv, data=kwargs)
        if not machine_created():
            raise DinghyError('The VM does not exist.')
        print(mk_ssh_config(), end='')
        return 0


class MountCLI(_BaseCommand):
    """Mount the host NFS export inside the running VM."""

    guest_dir = scfg.Value(
        '', type=str, help='Guest mount directory (default: $HOME).'
    )
    host_dir = scfg.Value(
        '', type=str, help='Host export directory (default: $HOME).'
    )
    port = scfg.Value(DEFAULT_NFS_PORT, type=int, help='NFS server port.')

    @classmethod
    def main(cls, argv=True, **kwargs):
        args = cls.cli(argv=argv, data=kwargs)
        if not machine_running():
            raise DinghyError('The VM is not running. Run `dinghy up` first.')
        default = NfsMount()
        nfs = NfsMount(
            guest_mount_dir=args.guest_dir or default.guest_mount_dir,
            host_mount_dir=args.host_dir or default.host_mount_dir,
            port=int(args.port),
        )
        mount(nfs)
        return 0
