"""Pytest configuration and fixtures for degrees-cli tests."""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest

from degrees_cli.models import Edge


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch):
    """Point the config home at a temp dir so tests never read ~/.degrees."""
    base_dir = tmp_path / "degrees_home"
    monkeypatch.setattr("degrees_cli.config.BASE_DIR", base_dir)
    monkeypatch.setattr("degrees_cli.config.CONFIG_FILE", base_dir / "config.toml")
    return base_dir


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handlers and level that `--verbose` installs on the package logger."""
    package_logger = logging.getLogger("degrees_cli")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_edges_path() -> Path:
    """Small character network with one duplicate and one malformed line."""
    return Path(__file__).parent / "fixtures" / "hp_sample.csv"


@pytest.fixture
def chain_edges() -> List[Edge]:
    return [
        Edge("Harry Potter", "Ron Weasley"),
        Edge("Ron Weasley", "Hermione Granger"),
    ]


@pytest.fixture
def small_edges() -> List[Edge]:
    """Diamond with a cycle, a self loop, and a disconnected pair."""
    return [
        Edge("A", "B"),
        Edge("A", "C"),
        Edge("B", "D"),
        Edge("C", "D"),
        Edge("D", "E"),
        Edge("E", "A"),
        Edge("C", "C"),
        Edge("X", "Y"),
        Edge("Y", "A"),
    ]
