"""NFS mount descriptor consumed by the SSH-driven mount sequence.

Running the host-side NFS daemon is handled elsewhere; only the parameters
needed to mount its export inside the VM live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_NFS_PORT = 19321


def _home() -> str:
    return str(Path.home())


@dataclass(frozen=True)
class NfsMount:
    guest_mount_dir: str = field(default_factory=_home)
    host_mount_dir: str = field(default_factory=_home)
    port: int = DEFAULT_NFS_PORT
