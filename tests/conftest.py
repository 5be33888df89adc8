"""
Pytest configuration and fixtures for remote_mount tests

This is the main conftest.py that configures pytest and imports
fixtures from the fixtures/ directory.
"""
import os
import sys

import pytest
import structlog

# Add parent directory to path so we can import from remote_mount/ and tests/
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import fixtures from fixtures directory
pytest_plugins = [
    "tests.fixtures.binaries",
    "tests.fixtures.handlers",
]

SSHFS_ENV_VARS = [
    "REMOTE_MOUNT_SSHFS_MOUNTPOINT",
    "REMOTE_MOUNT_SSHFS_CONNECTION_STRING",
    "REMOTE_MOUNT_SSHFS_PASSWORD",
    "REMOTE_MOUNT_SSHFS_OPTIONS",
    "REMOTE_MOUNT_SSHFS_EXTRA_ARGS",
]


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run fake sshfs/fusermount binaries through sh"
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_sshfs_env(monkeypatch):
    """Remove every REMOTE_MOUNT_SSHFS_* variable from the environment"""
    for name in SSHFS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
