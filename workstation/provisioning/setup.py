"""
Container first-time setup

Creates the workstation container once, waits for it to accept commands,
seeds the caller's SSH key pair when present, and sets the internal user's
password.
"""

import logging
import time
from collections.abc import Callable

from rich.console import Console

from workstation.container.runtime import DockerRuntime, Secret
from workstation.core.config import Settings
from workstation.core.exceptions import ContainerNotReadyError
from workstation.provisioning.assets import SUDO_SCRIPT, require_asset
from workstation.provisioning.steps import Step, StepRunner

logger = logging.getLogger(__name__)


class Provisioner:
    """
    Runs the provisioning steps for a fresh container.

    Nothing is rolled back on failure: a container that was created but not
    fully provisioned stays in place and counts as existing next time.
    """

    def __init__(
        self,
        settings: Settings,
        runtime: DockerRuntime,
        console: Console | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings
        self.runtime = runtime
        self.console = console or Console()
        self._sleep = sleep
        self._clock = clock

    def resolve_password(self, raw: str | None) -> str:
        """Return the chosen password, substituting the default when empty."""
        if not raw:
            logger.info("Empty password supplied, using default password")
            self.console.print("[yellow]Using default password[/yellow]")
            return self.settings.default_password
        return raw

    def create_container(self, password: str) -> None:
        self.settings.docs_dir.mkdir(parents=True, exist_ok=True)
        self.runtime.run(password)

    def wait_until_ready(self) -> None:
        """
        Wait for the container to accept exec commands.

        Sleeps the settle delay, then polls until the container is running
        and responsive or the readiness timeout expires.

        Raises:
            ContainerNotReadyError: If the timeout expires
        """
        self._sleep(self.settings.settle_delay)

        deadline = self._clock() + self.settings.ready_timeout
        attempts = 0
        while True:
            attempts += 1
            if self.runtime.get_status().running and self.runtime.is_responsive():
                logger.info(f"Container ready after {attempts} check(s)")
                return
            if self._clock() >= deadline:
                raise ContainerNotReadyError(self.runtime.name, self.settings.ready_timeout)
            logger.debug(f"Container not ready yet (attempt {attempts})")
            self._sleep(self.settings.ready_poll_interval)

    def has_ssh_keys(self) -> bool:
        return self.settings.ssh_private_key.is_file()

    def copy_ssh_keys(self) -> None:
        """Copy the caller's key pair into the user's ~/.ssh."""
        self.console.print(f"{self.settings.ssh_private_key.name} detected, copying to container")
        ssh_dir = f"{self.settings.home}/.ssh"
        self.runtime.exec_user("mkdir", ssh_dir)
        self.runtime.copy(self.settings.ssh_private_key, ssh_dir)
        self.runtime.copy(self.settings.ssh_public_key, ssh_dir)

    def change_password(self, password: str) -> None:
        """Set the sudo and user password via the shipped sudo.sh."""
        script = require_asset(self.settings, SUDO_SCRIPT)
        self.runtime.copy(script, "/tmp/sudo.sh")
        self.runtime.exec_root("bash", "/tmp/sudo.sh", self.settings.user, Secret(password))

    def steps(self, password: str) -> list[Step]:
        return [
            Step("create", "Creating container", lambda: self.create_container(password)),
            Step("wait", "Waiting for container startup", self.wait_until_ready),
            Step(
                "ssh-keys",
                "Copying SSH key pair",
                self.copy_ssh_keys,
                precondition=self.has_ssh_keys,
            ),
            Step("password", "Changing sudo password", lambda: self.change_password(password)),
        ]

    def setup(self, password: str | None) -> str:
        """
        Provision a new container.

        Args:
            password: Raw password input; empty selects the default

        Returns:
            The password that was applied
        """
        password = self.resolve_password(password)
        StepRunner("Setup").run(self.steps(password))
        return password
