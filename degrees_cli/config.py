"""Configuration paths and run defaults for degrees-cli."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("DEGREES_HOME", str(Path.home() / ".degrees"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"

# Built-in run defaults; overridden by the [run] section of CONFIG_FILE
DEFAULT_SAMPLE_SIZE = 5
DEFAULT_INCLUDE_START = True
DEFAULT_SEED = None


def ensure_base_dirs() -> None:
    """Create the base directory for local configuration if needed."""
    BASE_DIR.mkdir(parents=True, exist_ok=True)
