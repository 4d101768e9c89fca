"""Test configuration and fixtures."""

import pytest

from dbrl.core.types import ImporterConfig
from tests.helpers import FakeRunner


@pytest.fixture
def config(tmp_path):
    """Importer config whose working directories live under tmp_path."""
    temp_root = tmp_path / "tmp"
    temp_root.mkdir()
    return ImporterConfig(temp_root=str(temp_root))


@pytest.fixture
def runner():
    """Fake external command runner that always succeeds."""
    return FakeRunner()


@pytest.fixture
def deps_present(monkeypatch):
    """Pretend podman and brl are installed."""
    monkeypatch.setattr("dbrl.utils.dependencies.command_exists", lambda name: True)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring external tools"
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")
