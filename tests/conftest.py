"""Shared fixtures for www-launcher tests."""

import os
import sys
from pathlib import Path

import pytest

from www_launcher.config import LauncherConfig
from www_launcher.runner import TaskCommand

# Stands in for `npm`: launched as `python run start` inside www/, it records
# what it saw and exits with LAUNCH_EXIT_CODE.
TASK_SCRIPT = """\
import json
import os
import sys
from pathlib import Path

Path(os.environ["LAUNCH_RECORD"]).write_text(json.dumps({
    "cwd": os.getcwd(),
    "argv": sys.argv[1:],
    "env": dict(os.environ),
}))
sys.exit(int(os.environ.get("LAUNCH_EXIT_CODE", "0")))
"""


@pytest.fixture(autouse=True)
def clean_launcher_env(monkeypatch):
    """Keep the developer's own launcher settings out of the tests."""
    for name in list(os.environ):
        if name.startswith("WWW_LAUNCHER_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("NODE_OPTIONS", raising=False)


@pytest.fixture
def install_dir(tmp_path) -> Path:
    """An install directory with a launcher script and a www application."""
    base = tmp_path / "install"
    www = base / "www"
    www.mkdir(parents=True)
    (base / "run.py").write_text("# launcher\n")
    (www / "run").write_text(TASK_SCRIPT)
    return base


@pytest.fixture
def record_file(tmp_path, monkeypatch) -> Path:
    """Where the stand-in task writes what it observed."""
    path = tmp_path / "record.json"
    monkeypatch.setenv("LAUNCH_RECORD", str(path))
    return path


@pytest.fixture
def python_task_config() -> LauncherConfig:
    """Configuration that runs the stand-in task with the current interpreter."""
    return LauncherConfig(command=TaskCommand(runner=sys.executable))
