"""Roblox Studio resolution entry point.

Resolution priority:
1. ``ROBLOX_STUDIO_PATH`` environment variable (any platform)
2. Platform discovery strategy selected from the platform tag

Nothing is cached: every call re-reads the environment, registry and
filesystem.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from roblox_install.core.config import LocatorSettings, load_settings
from roblox_install.core.exceptions import EnvironmentVariableError
from roblox_install.core.layout import locate_from_directory
from roblox_install.core.models import RobloxStudio
from roblox_install.core.registry import RegistryReader
from roblox_install.core.strategies import get_strategy_for_platform

logger = logging.getLogger(__name__)


class StudioLocator:
    """Resolve a Roblox Studio installation.

    Every input the resolution depends on can be injected, so one host can
    exercise the discovery logic of any platform.

    Examples:
        >>> locator = StudioLocator(environ={"ROBLOX_STUDIO_PATH": "/opt/roblox"})
        >>> locator.override_root()
        PosixPath('/opt/roblox')
    """

    def __init__(
        self,
        *,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
        registry: Optional[RegistryReader] = None,
        settings: Optional[LocatorSettings] = None,
    ) -> None:
        """Initialize locator.

        Args:
            environ: Environment mapping (defaults to ``os.environ``)
            platform: Platform tag (defaults to ``sys.platform``)
            registry: Registry reader for Windows discovery
            settings: Locator settings (defaults to the bundled defaults)
        """
        self.environ = os.environ if environ is None else environ
        self.platform = sys.platform if platform is None else platform
        self.registry = registry
        self.settings = settings or load_settings()

    def locate(self) -> RobloxStudio:
        """Resolve the installation.

        Returns:
            The resolved installation

        Raises:
            RobloxInstallError: The first resolution failure
        """
        override = self.override_root()
        if override is not None:
            logger.debug("Using %s override: %s", self.settings.env_var, override)
            return locate_from_directory(override, self.settings)

        strategy_class = get_strategy_for_platform(self.platform)
        strategy = strategy_class(self.settings, self.environ, self.registry)
        return strategy.locate()

    def override_root(self) -> Optional[Path]:
        """Return the root named by the override variable, or None when unset.

        Raises:
            EnvironmentVariableError: If the variable is set but not a usable path
        """
        name = self.settings.env_var
        value = self.environ.get(name)
        if value is None:
            return None

        context = {"variable": name}
        if not value.strip():
            raise EnvironmentVariableError(
                f"could not convert environment variable `{name}` to path (value is empty)",
                context=context,
            )
        if "\x00" in value:
            raise EnvironmentVariableError(
                f"could not convert environment variable `{name}` to path (value contains a NUL byte)",
                context=context,
            )
        # Relative to the working directory; no `~` expansion.
        return Path(value).absolute()


def locate() -> RobloxStudio:
    """Resolve Roblox Studio from the current process environment.

    Raises:
        RobloxInstallError: If Roblox Studio cannot be located
    """
    return StudioLocator().locate()


__all__ = ["StudioLocator", "locate"]
