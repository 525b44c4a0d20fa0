"""Platform shell executors for running the formatter."""

import os
import platform
import shlex
import subprocess
from typing import List, Sequence, Tuple, Union

from utils.errors import ProcessLaunchError


class CommandExecutor:
    """Run a command line through the host command interpreter.

    Subclasses supply the interpreter invocation and the quoting rules for
    that interpreter.
    """

    def join(self, args: Sequence[str]) -> str:
        """Build a single command line from an argument vector."""
        raise NotImplementedError

    def shell_argv(self, command_line: str) -> Union[List[str], str]:
        """Return what ``subprocess.run`` is given to hand ``command_line`` to the shell."""
        raise NotImplementedError

    def execute(self, args: Sequence[str]) -> Tuple[str, str, int]:
        """Run ``args`` and wait for it to exit.

        Both output streams are read to completion before returning.

        Args:
            args: Executable followed by its arguments.

        Returns:
            Tuple of (stdout, stderr, return_code)

        Raises:
            ProcessLaunchError: If the shell could not be started.
        """
        command_line = self.join(args)
        try:
            result = subprocess.run(
                self.shell_argv(command_line),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ProcessLaunchError(command_line, str(e)) from e
        return result.stdout, result.stderr, result.returncode


class PosixShellExecutor(CommandExecutor):
    """Runs commands with ``/bin/sh -c``."""

    def __init__(self, shell: str = "/bin/sh"):
        self.shell = shell

    def join(self, args: Sequence[str]) -> str:
        return " ".join(shlex.quote(arg) for arg in args)

    def shell_argv(self, command_line: str) -> List[str]:
        return [self.shell, "-c", command_line]


class WindowsShellExecutor(CommandExecutor):
    """Runs commands with ``%ComSpec% /c``."""

    def __init__(self, comspec: str = None):
        self.comspec = comspec or os.environ.get("ComSpec", "cmd.exe")

    def join(self, args: Sequence[str]) -> str:
        return subprocess.list2cmdline(list(args))

    def shell_argv(self, command_line: str) -> str:
        # a list would be re-quoted by list2cmdline, which cmd.exe does not undo
        comspec = subprocess.list2cmdline([self.comspec])
        return f'{comspec} /c "{command_line}"'


def select_executor(system: str = None) -> CommandExecutor:
    """Pick the executor for the host platform.

    Args:
        system: Platform name as returned by ``platform.system()``. Defaults
            to the current host.

    Returns:
        CommandExecutor: The Windows executor on Windows, the POSIX one elsewhere.
    """
    system = system or platform.system()
    if system == "Windows":
        return WindowsShellExecutor()
    return PosixShellExecutor()
