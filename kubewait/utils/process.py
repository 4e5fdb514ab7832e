import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    command: str
    args: tuple[str, ...]
    returncode: int
    output: str
    """
    Combined stdout and stderr.
    """

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join((self.command, *self.args))


def run_command(command: str, args: Sequence[str] = ()) -> CommandResult:
    """
    Run a command to completion with the current environment.

    Raises:
        OSError: When the command cannot be spawned.
    """
    completed = subprocess.run(
        [command, *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        env=os.environ.copy(),
        check=False,
    )
    return CommandResult(
        command=command,
        args=tuple(args),
        returncode=completed.returncode,
        output=completed.stdout.decode(errors="replace"),
    )
