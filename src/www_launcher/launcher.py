"""Core launch sequence for www-launcher."""

import logging
import os
from pathlib import Path

from pydantic import BaseModel

from .config import LauncherConfig
from .environment import build_child_env, describe_overlay
from .errors import TargetDirectoryError
from .locator import resolve_base_dir
from .runner import Runner, create_runner, resolve_executable

logger = logging.getLogger(__name__)


class LaunchPlan(BaseModel):
    """Everything needed to start the delegated task."""
    
    base_dir: Path
    work_dir: Path
    argv: list[str]
    env: dict[str, str]
    overlay: dict[str, str]


class Launcher:
    """Starts the task runner in the application directory.
    
    The steps run in order and any failure aborts the rest: locate the
    install directory, build the child environment, check the application
    directory, then delegate to the task runner.
    """
    
    def __init__(self, config: LauncherConfig | None = None, runner: Runner | None = None):
        self.config = config or LauncherConfig()
        self.runner = runner or create_runner(self.config.strategy)
    
    def locate(self, entry_point: str | os.PathLike | None) -> Path:
        """Resolve the base directory for ``entry_point``."""
        return resolve_base_dir(entry_point, override=self.config.base_dir)
    
    def prepare(self, base_dir: Path) -> LaunchPlan:
        """Build the launch plan without starting anything."""
        overlay = self.config.overlay()
        env = build_child_env(overlay=overlay)
        
        work_dir = base_dir / self.config.target_dir
        if not work_dir.is_dir():
            raise TargetDirectoryError(work_dir)
        
        argv = self.config.command.argv()
        argv[0] = resolve_executable(argv[0], env)
        
        return LaunchPlan(
            base_dir=base_dir,
            work_dir=work_dir,
            argv=argv,
            env=env,
            overlay=overlay,
        )
    
    def launch(self, base_dir: Path) -> int:
        """Run the task and return its exit status."""
        plan = self.prepare(base_dir)
        
        logger.info(f"Base directory: {plan.base_dir}")
        logger.info(f"Environment overlay: {describe_overlay(plan.overlay)}")
        logger.info(f"Running {' '.join(self.config.command.argv())} in {plan.work_dir} ({self.runner.name})")
        
        return self.runner.run(plan.argv, plan.env, plan.work_dir)
