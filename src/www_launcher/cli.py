"""CLI interface for www-launcher."""

import logging
import os
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from .config import ConfigManager, LauncherConfig
from .errors import LauncherError
from .launcher import Launcher
from .locator import default_entry_point
from .version import __version__

app = typer.Typer(
    name="www-launcher",
    help="🚀 Start the www application with npm run start",
    add_completion=False,
)
console = Console(stderr=True)
logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr through rich."""
    root = logging.getLogger()
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(RichHandler(console=console, show_path=False))
    root.setLevel(level)


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"[bold cyan]🚀 www-launcher[/bold cyan] v{__version__}")
        raise typer.Exit()


def run_launcher(entry_point: str | os.PathLike | None) -> int:
    """Locate the install directory, load its configuration and launch."""
    settings = LauncherConfig()
    configure_logging(settings.log_level)
    
    base_dir = Launcher(settings).locate(entry_point)
    config = ConfigManager().load_config(base_dir)
    if config.log_level != settings.log_level:
        configure_logging(config.log_level)
    
    return Launcher(config).launch(base_dir)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def start(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
) -> None:
    """Run npm run start in the www directory next to this launcher.
    
    Arguments are ignored and not passed on to the task. The install
    directory is taken from the script that was run; when started as an
    installed `www-launcher` command or with `python -m www_launcher`, set
    WWW_LAUNCHER_BASE_DIR to the directory that contains www.
    """
    if ctx.args:
        logger.debug(f"Ignoring arguments: {' '.join(ctx.args)}")
    
    obj = ctx.obj or {}
    entry_point = obj.get("entry_point") or default_entry_point()
    
    try:
        status = run_launcher(entry_point)
    except LauncherError as e:
        logger.error(str(e))
        console.print(Panel(
            Text(str(e)),
            title="[red]❌ Launch failed[/red]",
            border_style="red"
        ))
        raise typer.Exit(e.exit_code)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        console.print(Panel(
            Text(str(e)),
            title="[red]❌ Invalid configuration[/red]",
            border_style="red"
        ))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted.[/dim]")
        raise typer.Exit(130)
    
    raise typer.Exit(status)


def main(entry_point: str | os.PathLike | None = None) -> None:
    """Main entry point."""
    app(obj={"entry_point": entry_point})


if __name__ == "__main__":
    main()
