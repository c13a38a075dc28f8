"""Linux discovery strategy.

On Linux, Studio runs under Wine through a wrapper that keeps its own
prefix in ``~/.local/share/<emulator>/wineprefix``. The Windows install
inside that prefix is then resolved like any other candidate root.
"""
from __future__ import annotations

import logging
from pathlib import Path

from roblox_install.core.exceptions import PlatformNotSupported
from roblox_install.core.layout import locate_from_directory
from roblox_install.core.models import RobloxStudio
from roblox_install.core.strategies import BaseDiscoveryStrategy

logger = logging.getLogger(__name__)


class EmulationPrefixStrategy(BaseDiscoveryStrategy):
    """Locate the Windows install kept in a Wine prefix."""

    platform = "linux"

    def prefix_root(self) -> Path:
        """Return the install root inside the Wine prefix.

        Raises:
            PlatformNotSupported: If ``HOME`` or ``USER`` is not set
        """
        home = (self.environ.get("HOME") or "").strip()
        user = (self.environ.get("USER") or "").strip()
        if not home or not user:
            raise PlatformNotSupported(context={"reason": "HOME and USER must be set"})

        return (
            Path(home)
            / ".local"
            / "share"
            / self.settings.emulator
            / "wineprefix"
            / "drive_c"
            / "users"
            / user
            / "AppData"
            / "Local"
            / self.settings.product
        )

    def locate(self) -> RobloxStudio:
        root = self.prefix_root()
        logger.debug("Probing Wine prefix install at %s", root)
        return locate_from_directory(root, self.settings)


__all__ = ["EmulationPrefixStrategy"]
