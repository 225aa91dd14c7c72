"""SSH config generation, SSH command execution, and the NFS mount sequence."""

from __future__ import annotations

import re
import shlex
from pathlib import Path
from typing import NoReturn, Optional

from loguru import logger

from ..errors import CommandFailed, InspectionError
from ..nfs import NfsMount
from ..runtime import MACHINE_NAME, docker_machine_cmd, ssh_config_path
from ..util import exec_replace, run_cmd
from .inspect import MachineInspection, inspect_machine

log = logger

LEGACY_SHARE_DIR = '/Users'

_SSH_CONFIG_TEMPLATE = """\
Host {name}
  HostName {ip}
  User docker
  Port 22
  UserKnownHostsFile /dev/null
  StrictHostKeyChecking no
  PasswordAuthentication no
  IdentityFile {store_path}/id_rsa
  IdentitiesOnly yes
  LogLevel ERROR
"""


def ssh_config(inspection: Optional[MachineInspection] = None) -> str:
    if inspection is None:
        inspection = inspect_machine()
    # docker-machine does not report the identity file, so build it from the
    # store path.
    return _SSH_CONFIG_TEMPLATE.format(
        name=MACHINE_NAME,
        ip=inspection.require_ip_address(),
        store_path=inspection.require_store_path(),
    )


def write_ssh_config(inspection: Optional[MachineInspection] = None) -> Path:
    path = ssh_config_path()
    data = ssh_config(inspection).encode('utf-8')
    with open(path, 'wb') as f:
        f.write(data)
    log.debug('Wrote SSH config to {}', path)
    return path


def host_ip(ip: Optional[str] = None) -> str:
    """Host address as seen from the VM.

    Assumes docker-machine's host-only network hands the host the ``.1``
    address of the VM's subnet. Nothing verifies this.
    """
    if ip is None:
        ip = inspect_machine().require_ip_address()
    new, count = re.subn(r'\.\d+$', '.1', ip)
    if count != 1:
        raise InspectionError(f'Cannot derive host IP from VM address {ip!r}')
    return new


def ssh_handoff() -> NoReturn:
    """Replace this process with an interactive SSH session."""
    exec_replace(docker_machine_cmd('ssh', MACHINE_NAME))


def ssh(*command: str) -> None:
    if not command:
        ssh_handoff()
    res = run_cmd(
        docker_machine_cmd('ssh', MACHINE_NAME, '--', *command), capture=False
    )
    if res.code != 0:
        raise CommandFailed(
            f'Error executing command: {list(command)}', res.code
        )


def mount(nfs: NfsMount, *, ip: Optional[str] = None) -> None:
    print(f'Mounting NFS {nfs.guest_mount_dir}')
    # docker-machine always creates a vbox/vmware shared folder and has no
    # flag to skip it, so drop it before mounting over the same tree.
    ssh(f'sudo umount {LEGACY_SHARE_DIR} || true')

    guest_dir = shlex.quote(nfs.guest_mount_dir)
    host_dir = shlex.quote(nfs.host_mount_dir)
    ssh(f'sudo mkdir -p {guest_dir}')
    opts = (
        f'nfsvers=3,udp,mountport={nfs.port},port={nfs.port},nolock,hard,intr'
    )
    ssh(
        f'sudo mount -t nfs {host_ip(ip)}:{host_dir} {guest_dir} -o {opts}'
    )
