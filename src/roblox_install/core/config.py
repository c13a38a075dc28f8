"""Locator configuration loading.

Loads the product constants used during resolution from the bundled
``data/config/defaults.yaml`` file.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from roblox_install.core.exceptions import ConfigError

DEFAULTS_FILE = "defaults.yaml"

_REQUIRED: dict[str, tuple[str, ...]] = {
    "studio": ("env_var", "product", "executable"),
    "layout": ("content", "versions", "built_in_plugins", "plugins"),
    "windows": ("registry_key", "content_folder_value"),
    "macos": ("bundle", "executable"),
    "linux": ("emulator",),
}


@dataclass(frozen=True, slots=True)
class LocatorSettings:
    """Names and fixed locations used to find Roblox Studio.

    Attributes:
        env_var: Override variable holding an installation root
        product: Vendor directory name (``AppData/Local/<product>``)
        executable: Windows executable file name
        content_dir: Content directory name inside an install
        versions_dir: Directory holding versioned installs
        built_in_plugins_dir: Bundled plugins directory name
        plugins_dir: User plugins directory name
        registry_key: HKCU subkey written by the installer
        content_folder_value: Registry value naming the content folder
        macos_bundle: Absolute path of the macOS application bundle
        macos_executable: Executable name inside ``Contents/MacOS``
        emulator: Wine wrapper whose prefix holds the Linux install
    """

    env_var: str
    product: str
    executable: str
    content_dir: str
    versions_dir: str
    built_in_plugins_dir: str
    plugins_dir: str
    registry_key: str
    content_folder_value: str
    macos_bundle: str
    macos_executable: str
    emulator: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LocatorSettings:
        """Create LocatorSettings from the sectioned defaults mapping.

        Raises:
            ConfigError: If a section or key is missing or empty
        """
        for section, keys in _REQUIRED.items():
            values = data.get(section)
            if not isinstance(values, Mapping):
                raise ConfigError(
                    f"Locator config missing section: {section}",
                    context={"section": section},
                )
            missing = [k for k in keys if not str(values.get(k) or "").strip()]
            if missing:
                raise ConfigError(
                    f"Locator config section '{section}' missing required fields: {', '.join(missing)}",
                    context={"section": section, "missing": missing},
                )

        studio = data["studio"]
        layout = data["layout"]
        return cls(
            env_var=str(studio["env_var"]),
            product=str(studio["product"]),
            executable=str(studio["executable"]),
            content_dir=str(layout["content"]),
            versions_dir=str(layout["versions"]),
            built_in_plugins_dir=str(layout["built_in_plugins"]),
            plugins_dir=str(layout["plugins"]),
            registry_key=str(data["windows"]["registry_key"]),
            content_folder_value=str(data["windows"]["content_folder_value"]),
            macos_bundle=str(data["macos"]["bundle"]),
            macos_executable=str(data["macos"]["executable"]),
            emulator=str(data["linux"]["emulator"]),
        )


def load_settings() -> LocatorSettings:
    """Load locator settings from the bundled defaults."""
    from roblox_install.data import read_yaml

    data = read_yaml("config", DEFAULTS_FILE)
    if not isinstance(data, dict):
        raise ConfigError(f"{DEFAULTS_FILE} must contain a mapping")
    return LocatorSettings.from_dict(data)


__all__ = ["DEFAULTS_FILE", "LocatorSettings", "load_settings"]
