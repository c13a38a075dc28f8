"""Directory-shape disambiguation for Windows-style installs.

A candidate root is either a direct install (``<root>/content`` exists) or
a versioned root whose ``Versions`` directory holds one subdirectory per
installed version. The active version is the first subdirectory that
contains the Studio executable.

Version selection follows filesystem enumeration order, which is not
specified and may differ between runs and platforms. When several versions
qualify, callers must not rely on a particular one being chosen.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

from roblox_install.core.config import LocatorSettings
from roblox_install.core.exceptions import NotInstalled
from roblox_install.core.models import RobloxStudio

logger = logging.getLogger(__name__)


def locate_from_directory(root: Path, settings: LocatorSettings) -> RobloxStudio:
    """Resolve an installation from a candidate root directory.

    Args:
        root: Candidate installation root
        settings: Locator settings

    Returns:
        The resolved installation

    Raises:
        NotInstalled: If the root holds neither a direct nor a versioned install
    """
    content = root / settings.content_dir
    if _check_quietly(content.is_dir, content):
        logger.debug("Direct install found at %s", root)
        # Path("/").parent is Path("/"), so a rootless parent falls back to root.
        return RobloxStudio(
            root=root,
            application=root / settings.executable,
            built_in_plugins=root / settings.built_in_plugins_dir,
            plugins=root.parent / settings.plugins_dir,
            content=content,
        )

    versions = root / settings.versions_dir
    if not _check_quietly(versions.is_dir, versions):
        logger.debug("No %s or %s directory under %s", settings.content_dir, settings.versions_dir, root)
        raise NotInstalled(context={"root": str(root)})

    for version in _iter_version_dirs(versions):
        application = version / settings.executable
        if _check_quietly(application.is_file, application):
            logger.debug("Versioned install found at %s", version)
            return RobloxStudio(
                root=version,
                application=application,
                built_in_plugins=version / settings.built_in_plugins_dir,
                plugins=root / settings.plugins_dir,
                content=version / settings.content_dir,
            )

    raise NotInstalled(context={"root": str(root), "versions": str(versions)})


def _iter_version_dirs(versions: Path) -> Iterator[Path]:
    """Yield version subdirectories, skipping entries that cannot be read.

    A ``Versions`` directory that cannot be listed yields nothing.
    """
    try:
        entries = list(versions.iterdir())
    except OSError as exc:
        logger.debug("Cannot list %s: %s", versions, exc)
        return

    for entry in entries:
        if _check_quietly(entry.is_dir, entry):
            yield entry


def _check_quietly(check: Callable[[], bool], path: Path) -> bool:
    """Run an existence check, treating an unreadable path as absent."""
    try:
        return check()
    except OSError as exc:
        logger.debug("Skipping unreadable path %s: %s", path, exc)
        return False


__all__ = ["locate_from_directory"]
