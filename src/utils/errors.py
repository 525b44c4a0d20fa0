"""Error types raised by the unifmt core."""


class UniFmtError(Exception):
    """Base class for all unifmt errors."""


class DiscoveryError(UniFmtError):
    """Raised when the catalog root is missing or unreadable."""

    def __init__(self, root):
        self.root = root
        super().__init__(f"{root}: No such directory.")


class ConfigMissingError(UniFmtError):
    """Raised when the astyle options file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path}: No such file.")


class ProcessLaunchError(UniFmtError):
    """Raised when the shell running the formatter cannot be started."""

    def __init__(self, command_line: str, reason: str):
        self.command_line = command_line
        self.reason = reason
        super().__init__(f"Failed to launch '{command_line}': {reason}")


class ProcessOutputError(UniFmtError):
    """Text written to the error stream by a formatter run.

    Logged, never raised out of a batch.
    """

    def __init__(self, target: str, stderr: str):
        self.target = target
        self.stderr = stderr
        super().__init__(stderr.rstrip())


class ProvisionError(UniFmtError):
    """Raised when downloading or extracting astyle fails."""
