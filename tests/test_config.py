"""
Unit tests for remote_mount configuration
"""
import pytest

from remote_mount.config import Settings, SshfsSettings


@pytest.mark.unit
def test_settings_default_values(monkeypatch):
    """Test that settings have sensible defaults"""
    monkeypatch.delenv("REMOTE_MOUNT_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_settings_log_level_from_environment(monkeypatch):
    """Test log level is read from REMOTE_MOUNT_LOG_LEVEL"""
    monkeypatch.setenv("REMOTE_MOUNT_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"


@pytest.mark.unit
def test_sshfs_settings_defaults(clean_sshfs_env):
    """Test required SSHFS values are unset and optional ones are empty"""
    sshfs_settings = SshfsSettings(_env_file=None)

    assert sshfs_settings.mountpoint is None
    assert sshfs_settings.connection_string is None
    assert sshfs_settings.password is None
    assert sshfs_settings.options == ""
    assert sshfs_settings.extra_args == ""


@pytest.mark.unit
def test_sshfs_settings_from_environment(clean_sshfs_env):
    """Test SSHFS values are read from REMOTE_MOUNT_SSHFS_* variables"""
    clean_sshfs_env.setenv("REMOTE_MOUNT_SSHFS_CONNECTION_STRING", "user@host:/remote")
    clean_sshfs_env.setenv("REMOTE_MOUNT_SSHFS_PASSWORD", "secret123")
    clean_sshfs_env.setenv("REMOTE_MOUNT_SSHFS_OPTIONS", "ro,reconnect")

    sshfs_settings = SshfsSettings(_env_file=None)

    assert sshfs_settings.connection_string == "user@host:/remote"
    assert sshfs_settings.password == "secret123"
    assert sshfs_settings.options == "ro,reconnect"


@pytest.mark.unit
def test_sshfs_settings_env_file(clean_sshfs_env, tmp_path):
    """Test SSHFS values can come from a .env file"""
    env_file = tmp_path / ".env"
    env_file.write_text(
        "REMOTE_MOUNT_SSHFS_CONNECTION_STRING=user@host:/remote\n"
        "REMOTE_MOUNT_SSHFS_PASSWORD=from-dotenv\n"
    )

    sshfs_settings = SshfsSettings(_env_file=str(env_file))

    assert sshfs_settings.password == "from-dotenv"


@pytest.mark.unit
def test_sshfs_env_var_names():
    """Test env_var maps fields to their environment variable names"""
    assert SshfsSettings.env_var("password") == "REMOTE_MOUNT_SSHFS_PASSWORD"
    assert SshfsSettings.env_var("connection_string") == "REMOTE_MOUNT_SSHFS_CONNECTION_STRING"
