"""
Installer asset lookup

Installer scripts, the apt source fragment and the desktop shortcut ship
with the package and are copied verbatim into the container.
"""

from pathlib import Path

from workstation.core.config import Settings
from workstation.core.exceptions import AssetNotFoundError

SUDO_SCRIPT = "installers/sudo.sh"
OH_MY_ZSH_SCRIPT = "installers/oh-my-zsh.sh"
VSCODIUM_SCRIPT = "installers/vscodium.sh"
BACKPORTS_LIST = "conf/apt/backports.list"
VSCODIUM_DESKTOP = "desktop/VSCodium.desktop"


def require_asset(settings: Settings, relative: str) -> Path:
    """
    Resolve an asset path, failing before any copy is attempted.

    Raises:
        AssetNotFoundError: If the file is missing
    """
    path = settings.assets_dir / relative
    if not path.is_file():
        raise AssetNotFoundError(str(path))
    return path
