"""Shared test fixtures for the flatvec test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from flatvec.vector import Vector, VectorStore


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings and loaded TOML around each test."""
    from flatvec.config import get_settings
    from flatvec.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults so no test keeps another's output stream."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def royalty_vectors() -> list[Vector]:
    """Three labeled 3-d vectors: two close together, one far away."""
    return [
        Vector(id="1", values=[1.0, 0.1, 0.0], metadata="King"),
        Vector(id="2", values=[0.9, 0.2, 0.0], metadata="Queen"),
        Vector(id="3", values=[0.0, 0.8, 0.9], metadata="Apple"),
    ]


@pytest.fixture
def store() -> VectorStore:
    """Create an empty store."""
    return VectorStore()
