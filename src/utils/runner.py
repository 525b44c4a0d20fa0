"""Batch runner invoking the external formatter one file at a time."""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from loguru import logger

from utils.errors import ProcessLaunchError, ProcessOutputError
from utils.executor import CommandExecutor, select_executor


@dataclass(frozen=True)
class CommandSpec:
    """Formatter invocation for a single target file."""

    executable: str
    options_file: str
    target: str

    @property
    def args(self) -> List[str]:
        """Argument vector handed to the executor."""
        return [self.executable, f"--options={self.options_file}", self.target]

    @property
    def command_line(self) -> str:
        """Unquoted command line, as logged."""
        return f"{self.executable} --options={self.options_file} {self.target}"


@dataclass
class CommandResult:
    """Captured outcome of one formatter run."""

    spec: CommandSpec
    stdout: str = ""
    stderr: str = ""
    return_code: Optional[int] = None
    launch_error: Optional[ProcessLaunchError] = None

    @property
    def launched(self) -> bool:
        """True unless the process failed to start."""
        return self.launch_error is None

    @property
    def output_error(self) -> Optional[ProcessOutputError]:
        """The error stream wrapped as an error, or None when it was empty."""
        if not self.stderr:
            return None
        return ProcessOutputError(self.spec.target, self.stderr)

    def to_dict(self):
        """Return a JSON-serialisable summary."""
        return {
            "target": self.spec.target,
            "command": self.spec.command_line,
            "return_code": self.return_code,
            "stdout": self.stdout,
            "stderr": self.stderr,
            "launch_error": str(self.launch_error) if self.launch_error else None,
        }


def _log_result(result: CommandResult) -> None:
    if result.stdout:
        logger.info(result.stdout.rstrip())
    error = result.output_error
    if error is not None:
        logger.error(str(error))


def run_one(
    executable: str,
    options_file: str,
    target: str,
    executor: Optional[CommandExecutor] = None,
) -> CommandResult:
    """Format a single file.

    A launch failure is logged and recorded on the result instead of being
    raised. The exit code is recorded but not interpreted.

    Args:
        executable: Path or name of the astyle binary.
        options_file: Path of the astyle options file.
        target: File to format.
        executor: Shell executor, defaults to the one for the host platform.

    Returns:
        CommandResult: Captured output of the run.
    """
    executor = executor or select_executor()
    spec = CommandSpec(executable, options_file, target)
    logger.info(spec.command_line)

    result = CommandResult(spec)
    try:
        result.stdout, result.stderr, result.return_code = executor.execute(spec.args)
    except ProcessLaunchError as e:
        logger.error(str(e))
        result.launch_error = e
        return result

    _log_result(result)
    return result


def run_all(
    executable: str,
    options_file: str,
    targets: Iterable[str],
    executor: Optional[CommandExecutor] = None,
    on_complete: Optional[Callable[[List[CommandResult]], None]] = None,
) -> List[CommandResult]:
    """Format each target in order, one process at a time.

    A failed file never stops the batch. ``on_complete`` is called once with
    all results after the last file.

    Args:
        executable: Path or name of the astyle binary.
        options_file: Path of the astyle options file.
        targets: Files to format, in the order to format them.
        executor: Shell executor, defaults to the one for the host platform.
        on_complete: Post-batch refresh hook.

    Returns:
        List[CommandResult]: One result per target, in input order.
    """
    executor = executor or select_executor()
    results = [run_one(executable, options_file, target, executor) for target in targets]

    failed = sum(1 for result in results if not result.launched)
    logger.debug(f"Batch finished: {len(results)} files, {failed} failed to launch")

    if on_complete is not None:
        on_complete(results)
    return results
