"""Windows discovery strategy.

The Studio installer records its content folder in the per-user registry;
the installation root is that folder's parent.
"""
from __future__ import annotations

from pathlib import Path

from roblox_install.core.dirs import home_dir
from roblox_install.core.exceptions import (
    MalformedRegistry,
    PluginsDirectoryNotFound,
    RegistryError,
)
from roblox_install.core.models import RobloxStudio
from roblox_install.core.registry import WinregReader
from roblox_install.core.strategies import BaseDiscoveryStrategy


class RegistryStrategy(BaseDiscoveryStrategy):
    """Locate Studio from ``HKEY_CURRENT_USER\\Software\\Roblox\\RobloxStudio``."""

    platform = "win32"

    def locate(self) -> RobloxStudio:
        settings = self.settings
        registry = self.registry or WinregReader()
        context = {
            "key": settings.registry_key,
            "value": settings.content_folder_value,
        }

        try:
            value = registry.read_string_value(settings.registry_key, settings.content_folder_value)
        except OSError as exc:
            raise RegistryError(exc, context=context) from exc

        content = Path(value)
        root = content.parent
        # Filesystem roots and empty values are their own parent.
        if not value or root == content:
            raise MalformedRegistry(context={**context, "content_folder": value})

        return RobloxStudio(
            root=root,
            application=root / settings.executable,
            built_in_plugins=root / settings.built_in_plugins_dir,
            plugins=self.plugins_dir(),
            content=content,
        )

    def plugins_dir(self) -> Path:
        """Return ``<home>/AppData/Local/<product>/Plugins``.

        Raises:
            PluginsDirectoryNotFound: If the home directory is unknown
        """
        home = home_dir(self.environ, self.platform)
        if home is None:
            raise PluginsDirectoryNotFound()
        return home / "AppData" / "Local" / self.settings.product / self.settings.plugins_dir


__all__ = ["RegistryStrategy"]
