"""Configuration manager for degrees-cli using TOML files."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import toml

from . import config

logger = logging.getLogger(__name__)


RUN_SECTION = "run"


def default_run_config() -> Dict[str, Any]:
    """Built-in defaults for the ``[run]`` section."""
    return {
        "sample_size": config.DEFAULT_SAMPLE_SIZE,
        "include_start": config.DEFAULT_INCLUDE_START,
        "seed": config.DEFAULT_SEED,
    }


def load_full_config() -> Dict[str, Any]:
    """Load the entire TOML config (all sections)."""
    if not config.CONFIG_FILE.exists():
        return {}
    try:
        with open(config.CONFIG_FILE, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config.CONFIG_FILE, exc)
        return {}


def _save_full_config(data: Dict[str, Any]) -> None:
    """Write entire config dict to TOML file, preserving all sections."""
    config.ensure_base_dirs()
    with open(config.CONFIG_FILE, "w", encoding="utf-8") as f:
        toml.dump(data, f)


def load_config() -> Dict[str, Any]:
    """Load run configuration from the ``[run]`` section.

    Returns:
        Run settings with every key present. Keys missing from the file
        fall back to the built-in defaults.
    """
    merged = default_run_config()
    section = load_full_config().get(RUN_SECTION, {})
    for key in merged:
        if key in section:
            merged[key] = section[key]

    try:
        merged["sample_size"] = int(merged["sample_size"])
    except (TypeError, ValueError):
        logger.warning("Invalid sample_size %r in config, using default", merged["sample_size"])
        merged["sample_size"] = config.DEFAULT_SAMPLE_SIZE
    if not isinstance(merged["include_start"], bool):
        logger.warning("Invalid include_start %r in config, using default", merged["include_start"])
        merged["include_start"] = config.DEFAULT_INCLUDE_START
    seed = merged["seed"]
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        logger.warning("Invalid seed %r in config, ignoring it", seed)
        merged["seed"] = config.DEFAULT_SEED
    return merged


def save_run_config(
    sample_size: Optional[int] = None,
    include_start: Optional[bool] = None,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """Update the ``[run]`` section, preserving other sections in the file.

    Only the arguments that are not ``None`` are written.

    Returns:
        The stored ``[run]`` section.
    """
    data = load_full_config()
    section = dict(data.get(RUN_SECTION, {}))
    if sample_size is not None:
        section["sample_size"] = sample_size
    if include_start is not None:
        section["include_start"] = include_start
    if seed is not None:
        section["seed"] = seed
    data[RUN_SECTION] = section
    _save_full_config(data)
    return section


def clear_run_config() -> None:
    """Remove ``[run]`` section from config, resetting to defaults."""
    data = load_full_config()
    if data.pop(RUN_SECTION, None) is not None:
        _save_full_config(data)
