"""
Package installation

Installs the fixed developer tool set inside a running workstation. The
order matters: the backports list must be added and refreshed before the
backports package is installed, and the VSCodium repository script must run
before `codium` is installed.
"""

import logging

from workstation.container.runtime import DockerRuntime
from workstation.core.config import Settings
from workstation.core.exceptions import ConfigurationError
from workstation.provisioning.assets import (
    BACKPORTS_LIST,
    OH_MY_ZSH_SCRIPT,
    VSCODIUM_DESKTOP,
    VSCODIUM_SCRIPT,
    require_asset,
)
from workstation.provisioning.steps import Step, StepRunner

logger = logging.getLogger(__name__)

TOOLS = ["btop", "curl", "git", "gpg"]
LANGUAGES = ["build-essential", "php-cli", "php-xdebug", "python3", "valac"]
BACKPORTS_PACKAGES = ["golang-go"]
BUILD_TOOLS = ["meson"]
DATABASES = ["mariadb-server"]


class PackageInstaller:
    """Runs the ordered package installation steps."""

    def __init__(self, settings: Settings, runtime: DockerRuntime):
        self.settings = settings
        self.runtime = runtime

    def _root(self, *cmd: str) -> None:
        self.runtime.exec_root(*cmd)

    def _apt_install(self, *packages: str) -> None:
        self._root("apt", "install", "-y", *packages)

    def _copy_asset(self, relative: str, dest: str) -> None:
        self.runtime.copy(require_asset(self.settings, relative), dest)

    def add_backports(self) -> None:
        """Add the shipped backports list, which must name the configured suite."""
        source = require_asset(self.settings, BACKPORTS_LIST)
        suite = self.settings.backports_suite
        if suite not in source.read_text(encoding="utf-8").split():
            raise ConfigurationError(
                f"backports_suite '{suite}' is not listed in {source.name}",
                recovery_hint=f"Add '{suite}' to {source} or unset WORKSTATION_BACKPORTS_SUITE",
            )
        self.runtime.copy(source, "/etc/apt/sources.list.d")

    def refresh(self) -> None:
        self._root("apt", "update")
        self._root("apt", "upgrade", "-y")

    def install_tools(self) -> None:
        self._apt_install(*TOOLS)

    def install_shell(self) -> None:
        """zsh plus oh-my-zsh; the framework installs into the user's home as that user."""
        self._apt_install("zsh")
        self._copy_asset(OH_MY_ZSH_SCRIPT, "/tmp/oh-my-zsh.sh")
        self.runtime.exec_user("bash", "/tmp/oh-my-zsh.sh")
        self._root("chsh", self.settings.user, "-s", "/usr/bin/zsh")

    def install_vscodium(self) -> None:
        self._copy_asset(VSCODIUM_SCRIPT, "/tmp/vscodium.sh")
        self._root("bash", "/tmp/vscodium.sh")
        self._root("apt", "update")
        self._apt_install("codium")
        self._copy_asset(VSCODIUM_DESKTOP, f"{self.settings.home}/Desktop")

    def install_languages(self) -> None:
        self._apt_install(*LANGUAGES)
        self._root("apt", "install", "-t", self.settings.backports_suite, "-y", *BACKPORTS_PACKAGES)

    def install_nodejs(self) -> None:
        self._root("curl", "-fsSL", self.settings.nodesource_setup_url, "-o", "/tmp/nodesource_setup.sh")
        self._root("bash", "/tmp/nodesource_setup.sh")
        self._apt_install("nodejs")
        self._root("npm", "install", "--global", "yarn")

    def install_build_tools(self) -> None:
        self._apt_install(*BUILD_TOOLS)

    def install_databases(self) -> None:
        self._apt_install(*DATABASES)

    def steps(self) -> list[Step]:
        return [
            Step("backports", "Adding backports", self.add_backports),
            Step("refresh", "Refreshing packages", self.refresh),
            Step("tools", "Installing tools", self.install_tools),
            Step("shell", "Installing zsh and oh-my-zsh", self.install_shell),
            Step("vscodium", "Installing VSCodium", self.install_vscodium),
            Step("languages", "Installing programming languages", self.install_languages),
            Step("nodejs", "Installing Node.js and yarn", self.install_nodejs),
            Step("build-tools", "Installing build tools", self.install_build_tools),
            Step("databases", "Installing databases", self.install_databases),
        ]

    def install(self) -> None:
        StepRunner("Packages").run(self.steps())
