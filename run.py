#!/usr/bin/env python3
"""Start the www application from anywhere."""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).resolve().parent / "src"
sys.path.insert(0, str(src_path))

from www_launcher.cli import main

if __name__ == "__main__":
    main(__file__)
