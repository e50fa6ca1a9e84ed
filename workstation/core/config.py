"""
Configuration management

Centralized settings using Pydantic BaseSettings for type-safe configuration
with environment variable support. A single Settings instance describes the
one workstation container and is passed explicitly to every operation.
"""

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .paths import get_assets_dir, get_docs_dir, get_ssh_dir

logger = logging.getLogger(__name__)

# Docker-compatible container/host name
VALID_NAME_PATTERN = r"^[a-zA-Z0-9][a-zA-Z0-9_.-]{0,63}$"


class Settings(BaseSettings):
    """
    Workstation settings with environment variable support

    Settings can be overridden via environment variables:
    - WORKSTATION_CONTAINER_NAME=devbox
    - WORKSTATION_VNC_HOST_PORT=46901
    - WORKSTATION_DOCS_DIR=/srv/docs
    """

    # Container identity
    container_name: str = Field(default="workstation", pattern=VALID_NAME_PATTERN)
    hostname: str = Field(default="workstation", pattern=VALID_NAME_PATTERN)
    image: str = "accetto/debian-vnc-xfce-firefox-g3"
    shm_size: str = "256m"

    # Internal user
    user: str = "headless"
    default_password: str = "headless"

    # VNC port mapping (loopback only)
    vnc_bind_address: str = "127.0.0.1"
    vnc_host_port: int = 36901
    vnc_container_port: int = 6901

    # Host paths
    docs_dir: Path = get_docs_dir()
    assets_dir: Path = get_assets_dir()
    ssh_private_key: Path = get_ssh_dir() / "id_rsa"
    ssh_public_key: Path = get_ssh_dir() / "id_rsa.pub"

    # Preflight
    docker_service: str = "docker.service"

    # Readiness
    settle_delay: float = 2.0
    ready_timeout: float = 60.0
    ready_poll_interval: float = 1.0

    # Package sources; backports_suite must match the suite in assets/conf/apt/backports.list
    backports_suite: str = "bookworm-backports"
    nodesource_setup_url: str = "https://deb.nodesource.com/setup_22.x"

    model_config = SettingsConfigDict(
        env_prefix="WORKSTATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("vnc_host_port", "vnc_container_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Ports must be valid TCP ports"""
        if not 1 <= v <= 65535:
            raise ValueError(f"Port {v} is outside 1-65535")
        return v

    @field_validator("settle_delay", "ready_timeout", "ready_poll_interval")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Delays cannot be negative"""
        if v < 0:
            raise ValueError("Delay must not be negative")
        return v

    @property
    def home(self) -> str:
        """Internal user's home directory inside the container"""
        return f"/home/{self.user}"

    @property
    def port_mapping(self) -> str:
        """Port publish spec for docker run"""
        return f"{self.vnc_bind_address}:{self.vnc_host_port}:{self.vnc_container_port}"

    @property
    def vnc_url(self) -> str:
        """Browser URL of the noVNC client"""
        return f"http://{self.vnc_bind_address}:{self.vnc_host_port}"


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get workstation settings (singleton)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If environment overrides are invalid
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e
        logger.debug(f"Loaded settings for container '{_settings.container_name}'")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
