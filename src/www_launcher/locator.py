"""Resolve the directory the launcher is installed in."""

import logging
import os
import sys
from pathlib import Path

from .errors import SelfLocationError

logger = logging.getLogger(__name__)

# Values sys.argv[0] takes when there is no script file behind the process
PSEUDO_ENTRY_POINTS = {"", "-", "-c", "-m"}


def default_entry_point() -> str | None:
    """Return the path the current process was started from, if any."""
    if not sys.argv:
        return None
    return sys.argv[0]


def resolve_base_dir(
    entry_point: str | os.PathLike | None,
    override: str | os.PathLike | None = None,
) -> Path:
    """Return the absolute, symlink-resolved directory containing ``entry_point``.
    
    The result does not depend on the caller's working directory: relative
    paths, absolute paths and symlinks to the entry point all resolve to the
    same directory. ``override`` replaces self-location with an explicit
    directory. There is no fallback to the current working directory.
    """
    if override is not None:
        try:
            base_dir = Path(override).expanduser().resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise SelfLocationError(
                f"Configured base directory does not exist: {override}"
            ) from e
        if not base_dir.is_dir():
            raise SelfLocationError(f"Configured base directory is not a directory: {base_dir}")
        logger.debug(f"Using configured base directory {base_dir}")
        return base_dir
    
    if entry_point is None or os.fspath(entry_point) in PSEUDO_ENTRY_POINTS:
        raise SelfLocationError(
            "Cannot determine the launcher location: no entry point script "
            f"(got {entry_point!r})"
        )
    
    try:
        resolved = Path(entry_point).absolute().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise SelfLocationError(
            f"Cannot determine the launcher location from {os.fspath(entry_point)!r}: {e}"
        ) from e
    
    base_dir = resolved if resolved.is_dir() else resolved.parent
    logger.debug(f"Resolved {entry_point} to base directory {base_dir}")
    return base_dir
