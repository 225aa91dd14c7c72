"""Machine operation exports for inspection, lifecycle, and connectivity helpers."""

from __future__ import annotations

from .connect import (
    host_ip,
    mount,
    ssh,
    ssh_config,
    ssh_handoff,
    write_ssh_config,
)
from .inspect import (
    NOT_CREATED,
    MachineInspection,
    inspect_machine,
    machine_created,
    machine_running,
    machine_status,
    parse_inspection,
)
from .lifecycle import (
    configure_new_machine,
    create_machine,
    destroy,
    halt,
    up,
    upgrade,
)

__all__ = [
    'NOT_CREATED',
    'MachineInspection',
    'configure_new_machine',
    'create_machine',
    'destroy',
    'halt',
    'host_ip',
    'inspect_machine',
    'machine_created',
    'machine_running',
    'machine_status',
    'mount',
    'parse_inspection',
    'ssh',
    'ssh_config',
    'ssh_handoff',
    'up',
    'upgrade',
    'write_ssh_config',
]
