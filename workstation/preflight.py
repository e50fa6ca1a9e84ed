"""
Preflight checks

Runs before anything touches the container: the Docker service must be
active, then the existence of the named container picks the code path.
"""

import logging

from workstation.container.docker import check_service_active
from workstation.container.runtime import DockerRuntime
from workstation.core.config import Settings
from workstation.core.exceptions import DockerNotRunningError

logger = logging.getLogger(__name__)


def check_docker_service(settings: Settings) -> None:
    """
    Verify the Docker service is active.

    Args:
        settings: Workstation settings (provides the systemd unit name)

    Raises:
        DockerNotRunningError: If the service is not active
    """
    if not check_service_active(settings.docker_service):
        logger.error(f"Docker service {settings.docker_service} is not active")
        raise DockerNotRunningError(settings.docker_service)

    logger.debug(f"Docker service {settings.docker_service} is active")


def container_exists(runtime: DockerRuntime) -> bool:
    """Query whether the workstation container exists. No side effects."""
    exists = runtime.exists()
    logger.debug(f"Container '{runtime.name}' exists: {exists}")
    return exists
