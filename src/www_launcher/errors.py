"""Errors raised while preparing or delegating a launch."""

from pathlib import Path


class LauncherError(Exception):
    """Base class for launcher failures.
    
    Every subclass is fatal: the CLI reports it and exits with ``exit_code``.
    """
    
    exit_code: int = 1


class SelfLocationError(LauncherError):
    """The launcher could not determine its own install directory."""


class TargetDirectoryError(LauncherError):
    """The directory holding the application to start is missing."""
    
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Target directory not found: {path}")


class CommandNotFoundError(LauncherError):
    """The task runner executable is not available on PATH."""
    
    exit_code = 127
    
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Command not found: {command}")


class DelegationError(LauncherError):
    """The task runner was found but could not be started."""
    
    exit_code = 126
    
    def __init__(self, command: str, reason: OSError):
        self.command = command
        super().__init__(f"Cannot run {command}: {reason.strerror or reason}")
