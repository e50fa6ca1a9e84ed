"""
Base exception hierarchy

Provides a consistent exception structure across the workstation tool
with clear error messages and recovery hints.
"""

from collections.abc import Sequence


class WorkstationError(Exception):
    """
    Base exception for all workstation errors

    Attributes:
        message: Error message
        component: Component that raised the error
        recovery_hint: Optional hint for recovery
        exit_code: Process exit status the CLI reports for this error
    """

    exit_code: int = 1

    def __init__(self, message: str, component: str = "", recovery_hint: str = ""):
        self.component = component
        self.recovery_hint = recovery_hint
        super().__init__(message)

    def __str__(self) -> str:
        msg = super().__str__()
        if self.component:
            msg = f"[{self.component}] {msg}"
        if self.recovery_hint:
            msg += f"\n💡 Recovery: {self.recovery_hint}"
        return msg


class ConfigurationError(WorkstationError):
    """Configuration-related errors"""

    def __init__(self, message: str, recovery_hint: str = ""):
        super().__init__(
            message,
            component="Configuration",
            recovery_hint=recovery_hint or "Check your WORKSTATION_* environment variables and .env file",
        )


class DockerNotRunningError(WorkstationError):
    """Docker service is not active on the host"""

    def __init__(self, service: str):
        self.service = service
        super().__init__(
            "Docker is not running!",
            component="Docker",
            recovery_hint=f"Start it with: sudo systemctl start {service}",
        )


class CommandError(WorkstationError):
    """
    External command exited with a non-zero status

    Attributes:
        command: The argument vector that failed
        returncode: Exit status of the command
        stderr: Captured standard error, if any was captured
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit status {returncode}: {' '.join(self.command)}"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(message, component="Command")

    @property
    def exit_code(self) -> int:
        return self.returncode or 1


class ContainerNotReadyError(WorkstationError):
    """Container did not become reachable within the readiness timeout"""

    def __init__(self, container: str, timeout: float):
        self.container = container
        self.timeout = timeout
        super().__init__(
            f"Container '{container}' was not ready after {timeout:g}s",
            component="Provisioning",
            recovery_hint=f"Inspect it with: docker logs {container}",
        )


class AssetNotFoundError(WorkstationError):
    """A shipped installer asset is missing"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Asset not found: {path}",
            component="Assets",
            recovery_hint="Reinstall the package or set WORKSTATION_ASSETS_DIR",
        )
