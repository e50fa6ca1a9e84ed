"""
Core interfaces and protocols

Defines protocols for dependency injection between the lifecycle manager
and its interactive collaborators.
"""

from typing import Protocol


class IPrompter(Protocol):
    """Protocol for interactive prompt implementations"""

    def ask_password(self) -> str:
        """Ask for the VNC/sudo password (may return an empty string)"""
        ...

    def confirm_reset(self) -> bool:
        """Ask before destroying the container"""
        ...

    def choose_action(self) -> str:
        """Show the action menu and return the selected token"""
        ...
