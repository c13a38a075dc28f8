"""Roblox Studio resolution exceptions.

Every failure of :func:`roblox_install.locate` is raised as one of the
exceptions below so callers can branch on the failure kind and render a
human-readable message with ``str(error)``.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class RobloxInstallError(Exception):
    """Base exception for Roblox Studio resolution."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    @property
    def cause(self) -> Optional[BaseException]:
        """Underlying error this failure wraps, if any."""
        return self.__cause__

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(RobloxInstallError):
    """Raised when the bundled locator defaults are missing or invalid."""


class EnvironmentVariableError(RobloxInstallError):
    """Raised when the override variable is set but is not a usable path."""

    def __init__(self, reason: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(f"environment variable misconfigured: {reason}", context=context)
        self.reason = reason


class RegistryError(RobloxInstallError):
    """Raised when the Roblox Studio registry key or value cannot be read.

    The underlying :class:`OSError` is kept as :attr:`error` and
    :attr:`cause`, whether or not the raise uses ``from``.
    """

    def __init__(self, error: OSError, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            f"Couldn't find registry keys, Roblox might not be installed. ({error})",
            context=context,
        )
        self.error = error
        self.__cause__ = error


class MalformedRegistry(RobloxInstallError):
    """Raised when the registry content folder has no parent directory."""

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            "The values of the registry keys used to find Roblox are malformed, "
            "maybe your Roblox installation is corrupt?",
            context=context,
        )


class PluginsDirectoryNotFound(RobloxInstallError):
    """Raised when the home directory holding the user plugins is unknown."""

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("Couldn't find Plugins directory", context=context)


class DocumentsDirectoryNotFound(RobloxInstallError):
    """Raised when the user's Documents directory is unknown."""

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("Couldn't find Documents directory", context=context)


class PlatformNotSupported(RobloxInstallError):
    """Raised on platforms without a discovery strategy."""

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("Your platform is not currently supported", context=context)


class NotInstalled(RobloxInstallError):
    """Raised when a root holds neither a direct nor a versioned install."""

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("Couldn't find Roblox Studio", context=context)


__all__ = [
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
