"""
Dynamic path resolution for the workstation tool.

All paths are calculated from the installed package location so the tool
works regardless of the current working directory.
"""

import os
from pathlib import Path


def get_package_dir() -> Path:
    """
    Get the workstation package directory.

    Returns:
        Path: Absolute path to workstation/ directory
    """
    # This file is at: workstation/core/paths.py
    return Path(__file__).parent.parent.resolve()


def get_assets_dir() -> Path:
    """
    Get the directory holding installer scripts and config fragments
    copied into the container.

    Returns:
        Path: Absolute path to workstation/assets/
    """
    return get_package_dir() / "assets"


def get_data_dir() -> Path:
    """
    Get the host data directory (documents mounted into the container).

    Priority order:
    1. XDG_DATA_HOME/workstation
    2. ~/.local/share/workstation

    Returns:
        Path: Absolute path to the data directory (not created)
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return (base / "workstation").expanduser()


def get_docs_dir() -> Path:
    """Documents directory bind-mounted into the container."""
    return get_data_dir() / "docs"


def get_ssh_dir() -> Path:
    """The caller's SSH directory."""
    return Path.home() / ".ssh"
