"""
Container data models.

Contains the container status dataclass.
"""

from dataclasses import dataclass
from typing import Literal

ContainerStatus = Literal[
    "running",
    "exited",
    "paused",
    "created",
    "restarting",
    "removing",
    "dead",
    "not_created",
    "unknown",
]

KNOWN_STATUSES: frozenset[str] = frozenset(
    ["running", "exited", "paused", "created", "restarting", "removing", "dead"]
)


@dataclass
class WorkstationStatus:
    """Workstation container status."""

    name: str
    status: ContainerStatus
    url: str | None = None

    @property
    def exists(self) -> bool:
        return self.status != "not_created"

    @property
    def running(self) -> bool:
        return self.status == "running"
