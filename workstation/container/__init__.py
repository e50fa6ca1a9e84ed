"""
Container module - Docker access for the workstation container

Provides:
- Docker executable and service detection
- A synchronous runtime wrapper for the single named container
- Status models
"""

from workstation.container.models import (
    ContainerStatus,
    WorkstationStatus,
)
from workstation.container.runtime import DockerRuntime

__all__ = [
    "ContainerStatus",
    "DockerRuntime",
    "WorkstationStatus",
]
