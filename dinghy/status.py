"""Probe and rendering logic for VM and SSH config status reporting."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InspectionError
from .machine import NOT_CREATED, inspect_machine, machine_status
from .runtime import MACHINE_NAME, ssh_config_path


@dataclass(frozen=True)
class ProbeOutcome:
    ok: bool | None
    detail: str


def status_line(ok: bool | None, label: str, detail: str = '') -> str:
    icon = '✅' if ok is True else ('➖' if ok is None else '❌')
    suffix = f' - {detail}' if detail else ''
    return f'{icon} {label}{suffix}'


def probe_vm_state() -> tuple[ProbeOutcome, str]:
    state = machine_status()
    if state == NOT_CREATED:
        return ProbeOutcome(False, 'not created'), state
    if state == 'running':
        return ProbeOutcome(True, 'running'), state
    return ProbeOutcome(None, state), state


def probe_network() -> ProbeOutcome:
    try:
        insp = inspect_machine()
    except InspectionError as ex:
        return ProbeOutcome(False, str(ex))
    ip = insp.ip_address
    if not ip:
        return ProbeOutcome(None, 'no IP address reported')
    return ProbeOutcome(True, f'ip={ip} driver={insp.driver_name or "?"}')


def probe_ssh_config() -> ProbeOutcome:
    path = ssh_config_path()
    if path.exists():
        return ProbeOutcome(True, str(path))
    return ProbeOutcome(False, f'{path} (missing; run `dinghy up`)')


def render_status() -> str:
    vm, state = probe_vm_state()
    lines = [status_line(vm.ok, f'VM {MACHINE_NAME}', vm.detail)]
    if state == 'running':
        net = probe_network()
        lines.append(status_line(net.ok, 'Network', net.detail))
    ssh = probe_ssh_config()
    lines.append(status_line(ssh.ok, 'SSH config', ssh.detail))
    return '\n'.join(lines)
