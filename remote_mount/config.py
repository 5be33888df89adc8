from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package-wide settings"""

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_MOUNT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class SshfsSettings(BaseSettings):
    """SSHFS connection settings read from REMOTE_MOUNT_SSHFS_* variables"""

    # Required values stay None when unset so the handler can name the missing key
    mountpoint: Optional[str] = None
    connection_string: Optional[str] = None
    password: Optional[str] = None

    # Optional values default to empty
    options: str = ""
    extra_args: str = ""

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_MOUNT_SSHFS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def env_var(cls, field: str) -> str:
        """Environment variable name backing a field"""
        return f"{cls.model_config['env_prefix']}{field}".upper()


# Create settings instance
settings = Settings()
