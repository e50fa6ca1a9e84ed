"""
Docker detection utilities.

Handles:
- Docker executable detection
- Docker service activity check (systemd, falling back to the daemon itself)
"""

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

LINUX_DOCKER_PATHS = [
    Path("/usr/bin/docker"),
    Path("/usr/local/bin/docker"),
    Path("/snap/bin/docker"),
]


def find_docker_executable() -> str | None:
    """
    Find the Docker executable path.

    Checks in order:
    1. PATH
    2. Standard Linux paths: /usr/bin/docker, /usr/local/bin/docker, /snap/bin/docker

    Returns:
        Path to docker executable, or None if not found
    """
    docker_path = shutil.which("docker")
    if docker_path:
        logger.debug(f"Docker found in PATH: {docker_path}")
        return docker_path

    for path in LINUX_DOCKER_PATHS:
        if path.exists():
            logger.debug(f"Found Docker at: {path}")
            return str(path)

    logger.info("Docker executable not found anywhere")
    return None


def get_docker_command() -> list[str]:
    """
    Get the Docker command with proper path handling.

    Returns:
        List containing the docker command
    """
    docker_path = find_docker_executable()
    if docker_path:
        return [docker_path]

    # Fall back to just "docker" and let subprocess handle it
    return ["docker"]


def check_daemon_running() -> bool:
    """Check if the Docker daemon answers `docker info`."""
    try:
        result = subprocess.run(
            get_docker_command() + ["info"],
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            timeout=45,
        )
        if result.returncode == 0:
            logger.debug("Docker daemon is running")
            return True
        logger.debug(f"Docker daemon not running: {result.stderr}")
        return False
    except (FileNotFoundError, subprocess.TimeoutExpired, OSError) as e:
        logger.debug(f"Docker daemon not running: {e}")
        return False


def check_service_active(service: str = "docker.service") -> bool:
    """
    Check whether the Docker service is active.

    Asks systemd first (`systemctl is-active --quiet <service>`). Hosts
    without systemctl fall back to probing the daemon directly.

    Args:
        service: systemd unit name

    Returns:
        True if the service is active
    """
    systemctl = shutil.which("systemctl")
    if not systemctl:
        logger.debug("systemctl not found, probing Docker daemon instead")
        return check_daemon_running()

    try:
        result = subprocess.run(
            [systemctl, "is-active", "--quiet", service],
            timeout=15,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug(f"systemctl check failed for {service}: {e}")
        return False

    logger.debug(f"systemctl is-active {service} returned {result.returncode}")
    return result.returncode == 0
