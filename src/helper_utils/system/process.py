"""Process helpers: shell command execution and environment lookup."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass

import anyio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecResult:
    """Captured output of a finished shell command."""

    stdout: str
    stderr: str
    returncode: int = 0


async def exec_async(
    command: str,
    *,
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
    encoding: str = "utf-8",
) -> ExecResult:
    """Run *command* through the shell and capture its output.

    Args:
        command: Shell command line.
        cwd: Working directory for the command.
        env: Complete environment for the command (default: inherited).
        timeout: Seconds to wait before giving up.
        encoding: Used to decode stdout and stderr.

    Raises:
        subprocess.CalledProcessError: The command exited non-zero; the
            decoded output is attached as ``stdout`` / ``stderr``.
        TimeoutError: *timeout* elapsed first.
    """
    logger.debug("exec_async: %s", command)
    with anyio.fail_after(timeout):
        completed = await anyio.run_process(
            command,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            check=False,
        )

    stdout = completed.stdout.decode(encoding, errors="replace") if completed.stdout else ""
    stderr = completed.stderr.decode(encoding, errors="replace") if completed.stderr else ""
    if completed.returncode != 0:
        raise subprocess.CalledProcessError(completed.returncode, command, output=stdout, stderr=stderr)
    return ExecResult(stdout=stdout, stderr=stderr, returncode=completed.returncode)


def env(key: str, default: str | None = None) -> str | None:
    """Value of environment variable *key*, or *default* when it is unset.

    A variable set to the empty string counts as set.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    return value
