"""Runtime helpers for constructing docker-machine and VBoxManage command arguments."""

from __future__ import annotations

import ubelt as ub

MACHINE_NAME = 'dinghy'
DOCKER_MACHINE = 'docker-machine'
VBOXMANAGE = 'VBoxManage'
DINGHY_HOME = '~/.dinghy'


def docker_machine_cmd(*args: str) -> list[str]:
    return [DOCKER_MACHINE, *args]


def vboxmanage_cmd(*args: str) -> list[str]:
    return [VBOXMANAGE, *args]


def dinghy_home() -> ub.Path:
    return ub.Path(DINGHY_HOME).expand().ensuredir()


def ssh_config_path() -> ub.Path:
    # The fsevents_to_vm launchd plist hard-codes this location as well.
    return dinghy_home() / 'ssh-config'


def preferences_path() -> ub.Path:
    return dinghy_home() / 'preferences.toml'
