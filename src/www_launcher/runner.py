"""Delegation strategies for running the external task."""

import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from .errors import CommandNotFoundError, DelegationError

logger = logging.getLogger(__name__)

Strategy = Literal["spawn", "exec"]


class TaskCommand(BaseModel):
    """A package-manager task, e.g. ``npm run start``."""
    
    runner: str = "npm"
    task: str = "start"
    
    def argv(self) -> list[str]:
        return [self.runner, "run", self.task]


def resolve_executable(name: str, env: Mapping[str, str]) -> str:
    """Locate ``name`` on the PATH of the child environment."""
    path = shutil.which(name, path=env.get("PATH"))
    if path is None:
        raise CommandNotFoundError(name)
    return path


def exit_status(returncode: int) -> int:
    """Map a child return code to a process exit status.
    
    ``subprocess`` reports death by signal N as ``-N``; shells report it
    as ``128 + N``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class Runner(ABC):
    """Runs a command and reports its exit status."""
    
    name: Strategy
    
    @abstractmethod
    def run(self, argv: Sequence[str], env: Mapping[str, str], cwd: Path) -> int:
        """Run ``argv`` in ``cwd`` with ``env`` and return its exit status."""
        pass


class SpawnRunner(Runner):
    """Spawn the command as a child process and wait for it."""
    
    name: Strategy = "spawn"
    
    def run(self, argv: Sequence[str], env: Mapping[str, str], cwd: Path) -> int:
        try:
            completed = subprocess.run(list(argv), env=dict(env), cwd=str(cwd))
        except FileNotFoundError as e:
            raise CommandNotFoundError(argv[0]) from e
        except PermissionError as e:
            raise DelegationError(argv[0], e) from e
        status = exit_status(completed.returncode)
        logger.info(f"{' '.join(argv)} exited with status {status}")
        return status


class ExecRunner(Runner):
    """Replace the current process image with the command."""
    
    name: Strategy = "exec"
    
    def run(self, argv: Sequence[str], env: Mapping[str, str], cwd: Path) -> int:
        previous_cwd = os.getcwd()
        os.chdir(cwd)
        for handler in logging.getLogger().handlers:
            handler.flush()
        try:
            os.execvpe(argv[0], list(argv), dict(env))
        except FileNotFoundError as e:
            os.chdir(previous_cwd)
            raise CommandNotFoundError(argv[0]) from e
        except OSError as e:
            os.chdir(previous_cwd)
            raise DelegationError(argv[0], e) from e


def create_runner(strategy: Strategy = "spawn") -> Runner:
    """Create a runner for the given delegation strategy."""
    if strategy == "spawn":
        return SpawnRunner()
    if strategy == "exec":
        if os.name != "posix":
            logger.warning("exec strategy is only supported on POSIX, spawning instead")
            return SpawnRunner()
        return ExecRunner()
    raise ValueError(f"Unknown launch strategy: {strategy}")
