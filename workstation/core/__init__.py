"""
Core module - Configuration, paths and exceptions

Provides foundational components used across the workstation tool:
- Settings (pydantic-settings)
- Base exception hierarchy
- Package and host path resolution
"""

from workstation.core.config import (
    Settings,
    get_settings,
    reset_settings,
)
from workstation.core.exceptions import (
    AssetNotFoundError,
    CommandError,
    ConfigurationError,
    ContainerNotReadyError,
    DockerNotRunningError,
    WorkstationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "AssetNotFoundError",
    "CommandError",
    "ConfigurationError",
    "ContainerNotReadyError",
    "DockerNotRunningError",
    "WorkstationError",
]
