"""
Shared fixtures

Provides test settings pointing at a temporary directory, and in-memory
stand-ins for the Docker runtime and the interactive prompts.
"""

import io

import pytest
from rich.console import Console

from workstation.container.models import WorkstationStatus
from workstation.container.runtime import redact
from workstation.core.config import Settings
from workstation.core.exceptions import CommandError


class FakeRuntime:
    """Records docker operations and tracks container state in memory"""

    def __init__(self, settings: Settings, exists: bool = True, status: str = "running"):
        self.settings = settings
        self.container_exists = exists
        self.status = status if exists else "not_created"
        self.calls: list[tuple] = []
        self.fail_on = None
        self.ready_after = 0

    @property
    def name(self) -> str:
        return self.settings.container_name

    def _record(self, *call) -> None:
        self.calls.append(call)
        if self.fail_on is not None and self.fail_on(call):
            raise CommandError(redact(call), 100)

    def exists(self) -> bool:
        return self.container_exists

    def get_status(self) -> WorkstationStatus:
        return WorkstationStatus(name=self.name, status=self.status)

    def is_responsive(self) -> bool:
        if self.ready_after > 0:
            self.ready_after -= 1
            return False
        return self.status == "running"

    def run(self, password: str) -> None:
        self._record("run", password)
        self.container_exists = True
        self.status = "running"

    def start(self) -> None:
        self._record("start")
        self.status = "running"

    def stop(self) -> None:
        self._record("stop")
        self.status = "exited"

    def restart(self) -> None:
        self._record("restart")
        self.status = "running"

    def remove(self) -> None:
        self._record("remove")
        self.container_exists = False
        self.status = "not_created"

    def exec_root(self, *cmd: str) -> None:
        self._record("exec_root", *cmd)

    def exec_user(self, *cmd: str) -> None:
        self._record("exec_user", *cmd)

    def copy(self, src, dest: str) -> None:
        self._record("copy", str(src), dest)

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


class FakePrompter:
    """Scripted answers for the interactive prompts"""

    def __init__(self, password: str = "", confirm: bool = True, choice: str = "up"):
        self.password = password
        self.confirm = confirm
        self.choice = choice
        self.asked: list[str] = []

    def ask_password(self) -> str:
        self.asked.append("password")
        return self.password

    def confirm_reset(self) -> bool:
        self.asked.append("confirm")
        return self.confirm

    def choose_action(self) -> str:
        self.asked.append("menu")
        return self.choice


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the host environment"""
    return Settings(
        _env_file=None,
        docs_dir=tmp_path / "docs",
        ssh_private_key=tmp_path / ".ssh" / "id_rsa",
        ssh_public_key=tmp_path / ".ssh" / "id_rsa.pub",
        settle_delay=0,
        ready_timeout=5,
        ready_poll_interval=1,
    )


@pytest.fixture
def ssh_keys(settings):
    """Create a fake key pair at the configured host path"""
    settings.ssh_private_key.parent.mkdir(parents=True)
    settings.ssh_private_key.write_text("PRIVATE")
    settings.ssh_public_key.write_text("PUBLIC")
    return settings.ssh_private_key, settings.ssh_public_key


@pytest.fixture
def runtime(settings):
    return FakeRuntime(settings)


@pytest.fixture
def absent_runtime(settings):
    return FakeRuntime(settings, exists=False)


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def console():
    """Console writing to a buffer; read it back with console.file.getvalue()"""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def make_runtime(settings):
    """Factory for additional fake runtimes sharing the test settings"""

    def factory(exists: bool = True, status: str = "running") -> FakeRuntime:
        return FakeRuntime(settings, exists=exists, status=status)

    return factory
