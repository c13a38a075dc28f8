"""Core resolution logic for roblox_install."""
from __future__ import annotations

from roblox_install.core.config import LocatorSettings, load_settings
from roblox_install.core.exceptions import (
    ConfigError,
    DocumentsDirectoryNotFound,
    EnvironmentVariableError,
    MalformedRegistry,
    NotInstalled,
    PlatformNotSupported,
    PluginsDirectoryNotFound,
    RegistryError,
    RobloxInstallError,
)
from roblox_install.core.locator import StudioLocator, locate
from roblox_install.core.models import RobloxStudio
from roblox_install.core.registry import RegistryReader, WinregReader

__all__ = [
    # Entry points
    "locate",
    "StudioLocator",
    # Models
    "RobloxStudio",
    # Config
    "LocatorSettings",
    "load_settings",
    # Registry
    "RegistryReader",
    "WinregReader",
    # Exceptions
    "RobloxInstallError",
    "ConfigError",
    "EnvironmentVariableError",
    "RegistryError",
    "MalformedRegistry",
    "PluginsDirectoryNotFound",
    "DocumentsDirectoryNotFound",
    "PlatformNotSupported",
    "NotInstalled",
]
