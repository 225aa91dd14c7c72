"""Subprocess execution and command formatting helpers."""

from __future__ import annotations

import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import NoReturn, Sequence

from loguru import logger

log = logger


@dataclass(frozen=True)
class CmdResult:
    code: int
    stdout: str
    stderr: str


def shell_join(cmd: Sequence[str]) -> str:
    return ' '.join(shlex.quote(c) for c in cmd)


def run_cmd(cmd: Sequence[str], *, capture: bool = True) -> CmdResult:
    """Run ``cmd`` to completion and report its outcome.

    A nonzero exit is never raised; the caller reads ``CmdResult.code`` and
    decides. With ``capture=False`` output goes straight to the terminal and
    the result carries empty strings.
    """
    log.opt(depth=1).debug('RUN: {}', shell_join(cmd))
    p = subprocess.run(list(cmd), capture_output=capture, text=True)
    res = CmdResult(p.returncode, p.stdout or '', p.stderr or '')
    log.opt(depth=1).debug(
        'Command exited code={} cmd={}', p.returncode, shell_join(cmd)
    )
    return res


def exec_replace(cmd: Sequence[str]) -> NoReturn:
    """Replace the current process with ``cmd``. Never returns."""
    log.opt(depth=1).debug('EXEC: {}', shell_join(cmd))
    os.execvp(cmd[0], list(cmd))


def expand(path: str) -> str:
    return os.path.expandvars(os.path.expanduser(path))
