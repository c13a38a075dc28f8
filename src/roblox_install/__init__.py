"""
roblox_install - locate an installed Roblox Studio

Finds the Roblox Studio installation on the current machine and exposes
the paths of its executable, content directory and plugin directories.
"""

from roblox_install.core import (
    ConfigError,
    DocumentsDirectoryNotFound,
    EnvironmentVariableError,
    MalformedRegistry,
    NotInstalled,
    PlatformNotSupported,
    PluginsDirectoryNotFound,
    RegistryError,
    RobloxInstallError,
    RobloxStudio,
    StudioLocator,
    locate,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "locate",
    "StudioLocator",
    "RobloxStudio",
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
