"""Subprocess helpers used by resolvers that shell out (e.g. git)."""

import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a finished command.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run_command(
    args: Sequence[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run a command without a shell and capture its text output.

    Args:
        args: Executable followed by its arguments.
        check: Raise on a non-zero exit status.
        timeout: Seconds before the command is killed, None to wait forever.
        cwd: Working directory, the current one when None.
        env: Variables added on top of the inherited environment.

    Returns:
        CommandResult of the finished process.

    Raises:
        subprocess.CalledProcessError: If check is set and the command fails.
        subprocess.TimeoutExpired: If the timeout is exceeded.
        FileNotFoundError: If the executable does not exist.
    """
    proc = subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        cwd=cwd,
        env={**os.environ, **env} if env else None,
    )
    return CommandResult(stdout=proc.stdout, stderr=proc.stderr, returncode=proc.returncode)


def command_exists(name: str) -> bool:
    """Check whether an executable is on PATH."""
    return shutil.which(name) is not None
