"""Roblox Studio installation model.

Provides the immutable record returned by a successful resolution.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class RobloxStudio:
    """A resolved Roblox Studio installation.

    All paths are computed once during resolution; the accessors below
    perform no I/O. ``plugins`` is a convention directory and may not
    exist on disk yet.

    Attributes:
        root: Base directory of the installation
        application: Studio executable
        built_in_plugins: Plugins bundled with Studio
        plugins: User plugins directory
        content: Bundled content assets
    """

    root: Path
    application: Path
    built_in_plugins: Path
    plugins: Path
    content: Path

    @property
    def root_path(self) -> Path:
        """Base directory; its meaning differs between platforms."""
        return self.root

    @property
    def application_path(self) -> Path:
        return self.application

    @property
    def built_in_plugins_path(self) -> Path:
        return self.built_in_plugins

    @property
    def plugins_path(self) -> Path:
        return self.plugins

    @property
    def content_path(self) -> Path:
        return self.content

    @property
    def exe_path(self) -> Path:
        """Deprecated alias of :attr:`application_path`."""
        warnings.warn(
            "exe_path is deprecated, use application_path instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.application

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary of string paths keyed by field name
        """
        return {
            "root": str(self.root),
            "application": str(self.application),
            "built_in_plugins": str(self.built_in_plugins),
            "plugins": str(self.plugins),
            "content": str(self.content),
        }


__all__ = ["RobloxStudio"]
