"""macOS discovery strategy.

Studio is always installed as a single application bundle under
``/Applications``; the bundle layout is fixed and not versioned.
"""
from __future__ import annotations

from pathlib import Path

from roblox_install.core.dirs import documents_dir
from roblox_install.core.exceptions import DocumentsDirectoryNotFound
from roblox_install.core.models import RobloxStudio
from roblox_install.core.strategies import BaseDiscoveryStrategy


class FixedBundleStrategy(BaseDiscoveryStrategy):
    """Locate Studio inside its macOS application bundle."""

    platform = "darwin"

    def locate(self) -> RobloxStudio:
        settings = self.settings
        root = Path(settings.macos_bundle)
        contents = root / "Contents"
        resources = contents / "Resources"

        documents = documents_dir(self.environ, self.platform)
        if documents is None:
            raise DocumentsDirectoryNotFound()

        return RobloxStudio(
            root=root,
            application=contents / "MacOS" / settings.macos_executable,
            built_in_plugins=resources / settings.built_in_plugins_dir,
            plugins=documents / settings.product / settings.plugins_dir,
            content=resources / settings.content_dir,
        )


__all__ = ["FixedBundleStrategy"]
