"""
Docker runtime wrapper

Thin, synchronous wrapper around the docker CLI for the single named
workstation container. Every call blocks until the command finishes and
any non-zero exit raises CommandError.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from workstation.container.docker import get_docker_command
from workstation.container.models import KNOWN_STATUSES, WorkstationStatus
from workstation.core.config import Settings
from workstation.core.exceptions import CommandError

logger = logging.getLogger(__name__)

# Return codes reported when docker itself could not complete (as in coreutils timeout / shells)
TIMEOUT_RETURNCODE = 124
NOT_FOUND_RETURNCODE = 127


class Secret(str):
    """An argument value that is passed through but never logged or raised"""


def redact(cmd: Sequence[str]) -> list[str]:
    """Mask Secret arguments and the VNC password environment value."""
    redacted = []
    for part in cmd:
        if isinstance(part, Secret):
            part = "***"
        elif part.startswith("VNC_PW="):
            part = "VNC_PW=***"
        redacted.append(str(part))
    return redacted


class DockerRuntime:
    """
    Runs docker commands against the configured workstation container.

    Root commands run with `-u root:root` and a non-interactive Debian
    frontend; user commands run as `<user>:<user>`.
    """

    def __init__(self, settings: Settings, docker_cmd: list[str] | None = None):
        self.settings = settings
        self.docker_cmd = docker_cmd or get_docker_command()

    @property
    def name(self) -> str:
        return self.settings.container_name

    def docker(
        self,
        args: Sequence[str],
        *,
        quiet: bool = False,
        capture: bool = False,
        check: bool = True,
        timeout: float | None = None,
    ) -> subprocess.CompletedProcess:
        """
        Run a docker subcommand.

        Args:
            args: Arguments after `docker`
            quiet: Discard stdout (stderr still reaches the terminal)
            capture: Capture stdout/stderr instead of streaming them
            check: Raise CommandError on non-zero exit
            timeout: Optional timeout in seconds

        Returns:
            The completed process

        Raises:
            CommandError: If check is set and the command fails
        """
        cmd = self.docker_cmd + list(args)
        logger.debug(f"Running: {' '.join(redact(cmd))}")

        kwargs = {}
        if capture:
            kwargs["capture_output"] = True
        elif quiet:
            kwargs["stdout"] = subprocess.DEVNULL

        try:
            result = subprocess.run(
                cmd,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=timeout,
                **kwargs,
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"Command timed out after {timeout}s: {' '.join(redact(cmd))}")
            result = subprocess.CompletedProcess(cmd, TIMEOUT_RETURNCODE, "", f"timed out after {timeout}s")
        except (FileNotFoundError, OSError) as e:
            logger.debug(f"Could not run docker: {e}")
            result = subprocess.CompletedProcess(cmd, NOT_FOUND_RETURNCODE, "", str(e))

        if check and result.returncode != 0:
            stderr = result.stderr if isinstance(result.stderr, str) else ""
            logger.error(f"Command failed ({result.returncode}): {' '.join(redact(cmd))}")
            raise CommandError(redact(cmd), result.returncode, stderr)
        return result

    # ==========================================================================
    # Queries
    # ==========================================================================

    def exists(self) -> bool:
        """Check whether the named container exists."""
        result = self.docker(["inspect", "--type", "container", self.name], capture=True, check=False, timeout=15)
        return result.returncode == 0

    def get_status(self) -> WorkstationStatus:
        """Query the container state; never cached."""
        result = self.docker(
            ["inspect", "--type", "container", "-f", "{{.State.Status}}", self.name],
            capture=True,
            check=False,
            timeout=15,
        )
        if result.returncode != 0:
            return WorkstationStatus(name=self.name, status="not_created")

        status = result.stdout.strip().lower()
        if status not in KNOWN_STATUSES:
            logger.warning(f"Unexpected container status '{status}'")
            status = "unknown"
        return WorkstationStatus(name=self.name, status=status, url=self.settings.vnc_url)

    def is_responsive(self) -> bool:
        """Check that commands can be executed inside the container."""
        result = self.docker(["exec", self.name, "true"], capture=True, check=False, timeout=15)
        return result.returncode == 0

    # ==========================================================================
    # Container lifecycle
    # ==========================================================================

    def run_args(self, password: str) -> list[str]:
        """Build the `docker run` argument vector for a new workstation."""
        s = self.settings
        return [
            "run",
            # Detached
            "-d",
            f"--shm-size={s.shm_size}",
            # VNC, loopback only
            "-p", s.port_mapping,
            "-v", f"{s.docs_dir}:{s.home}/Documents",
            "-e", f"VNC_PW={password}",
            "--name", s.container_name,
            "--hostname", s.hostname,
            s.image,
        ]

    def run(self, password: str) -> None:
        """Create and start the container."""
        logger.info(f"Creating container '{self.name}' from {self.settings.image}")
        self.docker(self.run_args(password))

    def start(self) -> None:
        logger.info(f"Starting container '{self.name}'")
        self.docker(["start", self.name], quiet=True)

    def stop(self) -> None:
        logger.info(f"Stopping container '{self.name}'")
        self.docker(["stop", self.name], quiet=True)

    def restart(self) -> None:
        logger.info(f"Restarting container '{self.name}'")
        self.docker(["restart", self.name], quiet=True)

    def remove(self) -> None:
        logger.info(f"Removing container '{self.name}'")
        self.docker(["container", "rm", self.name], quiet=True)

    # ==========================================================================
    # In-container commands
    # ==========================================================================

    def exec_root(self, *cmd: str) -> None:
        """Run a command as root inside the container."""
        self.docker(
            ["exec", "-e", "DEBIAN_FRONTEND=noninteractive", "-u", "root:root", self.name, *cmd]
        )

    def exec_user(self, *cmd: str) -> None:
        """Run a command as the internal user inside the container."""
        user = self.settings.user
        self.docker(["exec", "-u", f"{user}:{user}", self.name, *cmd])

    def copy(self, src: Path | str, dest: str) -> None:
        """Copy a host file into the container."""
        self.docker(["cp", str(src), f"{self.name}:{dest}"])
