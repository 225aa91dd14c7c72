"""Machine state queries backed by `docker-machine status` and `inspect`."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from ..errors import InspectionError
from ..runtime import MACHINE_NAME, docker_machine_cmd
from ..util import run_cmd

log = logger

NOT_CREATED = 'not created'


@dataclass(frozen=True)
class MachineInspection:
    """Typed view over the JSON document printed by `docker-machine inspect`.

    Accessors return None for missing fields; the ``require_*`` variants raise
    :class:`InspectionError` instead.
    """

    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def driver(self) -> dict[str, Any]:
        node = self.raw.get('Driver')
        return node if isinstance(node, dict) else {}

    @property
    def driver_name(self) -> Optional[str]:
        return self.raw.get('DriverName')

    @property
    def ip_address(self) -> Optional[str]:
        return self.driver.get('IPAddress') or None

    @property
    def store_path(self) -> Optional[str]:
        # VirtualBox and VMware drivers nest StorePath at different depths.
        driver = self.driver
        if 'StorePath' in driver:
            machine = driver.get('MachineName') or MACHINE_NAME
            return os.path.join(driver['StorePath'], 'machines', machine)
        return self.raw.get('StorePath') or None

    def require_ip_address(self) -> str:
        ip = self.ip_address
        if not ip:
            raise InspectionError('Machine inspect output has no Driver.IPAddress')
        return ip

    def require_store_path(self) -> str:
        path = self.store_path
        if not path:
            raise InspectionError('Machine inspect output has no StorePath')
        return path


def parse_inspection(text: str) -> MachineInspection:
    try:
        raw = json.loads(text)
    except ValueError as ex:
        raise InspectionError(f'Could not parse machine inspect output: {ex}') from ex
    if not isinstance(raw, dict):
        raise InspectionError('Machine inspect output is not a JSON object')
    return MachineInspection(raw)


def inspect_machine() -> MachineInspection:
    """Inspect the machine. Raises InspectionError if it does not exist.

    An absent machine and a broken inspect look the same from here; callers
    that care should check :func:`machine_created` first.
    """
    res = run_cmd(docker_machine_cmd('inspect', MACHINE_NAME), capture=True)
    if res.code != 0:
        raise InspectionError(
            f'docker-machine inspect {MACHINE_NAME} failed (code={res.code}): '
            f'{res.stderr.strip()}'
        )
    return parse_inspection(res.stdout)


def machine_created() -> bool:
    res = run_cmd(docker_machine_cmd('status', MACHINE_NAME), capture=True)
    return res.code == 0


def machine_status() -> str:
    # Only the exit code proves absence; stdout may hold an error message.
    res = run_cmd(docker_machine_cmd('status', MACHINE_NAME), capture=True)
    if res.code != 0:
        log.debug('Machine {} not created: {}', MACHINE_NAME, res.stderr.strip())
        return NOT_CREATED
    return res.stdout.strip().lower()


def machine_running() -> bool:
    return machine_status() == 'running'
