"""User directory lookups."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Mapping, Optional


def home_dir(environ: Mapping[str, str], platform: str = sys.platform) -> Optional[Path]:
    """Return the user's home directory, or None when it cannot be determined.

    The given environment is consulted first (``USERPROFILE`` then ``HOME``
    on Windows, ``HOME`` elsewhere) before falling back to the OS lookup.
    """
    names = ("USERPROFILE", "HOME") if platform == "win32" else ("HOME",)
    for name in names:
        value = (environ.get(name) or "").strip()
        if value:
            return Path(value)
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def documents_dir(environ: Mapping[str, str], platform: str = sys.platform) -> Optional[Path]:
    """Return the user's Documents directory, or None when there is no home."""
    home = home_dir(environ, platform)
    if home is None:
        return None
    return home / "Documents"


__all__ = ["home_dir", "documents_dir"]
