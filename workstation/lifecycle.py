"""
Workstation lifecycle management

Full install for a missing container, and start/stop/reset for an existing
one. Interactive menu selections and command-line tokens both go through
resolve_action() and WorkstationManager.dispatch().
"""

import logging
from enum import Enum

from rich.console import Console

from workstation.container.runtime import DockerRuntime
from workstation.core.config import Settings
from workstation.core.interfaces import IPrompter
from workstation.provisioning.packages import PackageInstaller
from workstation.provisioning.setup import Provisioner

logger = logging.getLogger(__name__)


class MenuAction(str, Enum):
    """Lifecycle actions offered for an existing container"""

    UP = "up"
    DOWN = "down"
    RESET = "reset"

    @property
    def label(self) -> str:
        return {
            MenuAction.UP: "Start container",
            MenuAction.DOWN: "Stop container",
            MenuAction.RESET: "Reset container",
        }[self]


# Numeric menu tokens accepted for compatibility with older invocations
LEGACY_TOKENS = {
    "1": MenuAction.UP,
    "2": MenuAction.DOWN,
    "3": MenuAction.RESET,
}


def resolve_action(token: str | None) -> MenuAction | None:
    """
    Map a menu or command-line token to an action.

    Args:
        token: Raw token ("up", "down", "reset", or "1"/"2"/"3")

    Returns:
        The matching MenuAction, or None for anything unrecognized
    """
    if token is None:
        return None
    token = token.strip().lower()
    if token in LEGACY_TOKENS:
        return LEGACY_TOKENS[token]
    try:
        return MenuAction(token)
    except ValueError:
        return None


class WorkstationManager:
    """
    Manages the single workstation container.

    Attributes:
        settings: Workstation settings
        runtime: Docker runtime bound to the container
        prompter: Interactive prompts (password, reset confirmation, menu)
        password: Preset password; when None the prompter is asked
        assume_yes: Skip the reset confirmation
    """

    def __init__(
        self,
        settings: Settings,
        runtime: DockerRuntime,
        prompter: IPrompter,
        console: Console | None = None,
        password: str | None = None,
        assume_yes: bool = False,
        provisioner: Provisioner | None = None,
        installer: PackageInstaller | None = None,
    ):
        self.settings = settings
        self.runtime = runtime
        self.prompter = prompter
        self.console = console or Console()
        self.password = password
        self.assume_yes = assume_yes
        self.provisioner = provisioner or Provisioner(settings, runtime, self.console)
        self.installer = installer or PackageInstaller(settings, runtime)

    def install(self) -> None:
        """Create, provision and install packages, then restart the container."""
        password = self.password if self.password is not None else self.prompter.ask_password()

        self.console.print("[bold cyan]Creating container...[/bold cyan]")
        self.provisioner.setup(password)

        self.console.print("[bold cyan]Installing dependencies...[/bold cyan]")
        self.installer.install()

        self.runtime.restart()
        self.console.print("[bold green]Container ready to go![/bold green]")
        self.console.print(f"VNC: [green]{self.settings.vnc_url}[/green]")

    def start(self) -> None:
        self.runtime.start()

    def stop(self) -> None:
        self.runtime.stop()

    def reset(self) -> bool:
        """
        Destroy and recreate the container after confirmation.

        Returns:
            True if the reset ran, False if it was declined
        """
        if not self.assume_yes and not self.prompter.confirm_reset():
            logger.info("Reset declined, container left untouched")
            return False

        logger.info(f"Resetting container '{self.runtime.name}'")
        self.runtime.stop()
        self.runtime.remove()
        self.install()
        return True

    def dispatch(self, action: MenuAction | None) -> None:
        """Run a resolved action; None does nothing."""
        if action is None:
            logger.debug("No recognized action, nothing to do")
            return

        logger.info(f"Dispatching action '{action.value}'")
        if action is MenuAction.UP:
            self.start()
        elif action is MenuAction.DOWN:
            self.stop()
        elif action is MenuAction.RESET:
            self.reset()

    def interactive(self) -> None:
        """Show the menu and dispatch the selection."""
        self.dispatch(resolve_action(self.prompter.choose_action()))

    def non_interactive(self, token: str) -> None:
        self.dispatch(resolve_action(token))
