"""Read-only access to the Windows registry.

The locator never talks to ``winreg`` directly; it goes through a
:class:`RegistryReader` so other platforms and tests can substitute a fake.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RegistryReader(Protocol):
    """Protocol for per-user registry readers."""

    def read_string_value(self, key_path: str, value_name: str) -> str:
        """Return a string value stored under ``HKEY_CURRENT_USER\\key_path``.

        Raises:
            OSError: If the key or value is missing, inaccessible or not a string
        """
        ...


class WinregReader:
    """RegistryReader backed by the standard ``winreg`` module."""

    def read_string_value(self, key_path: str, value_name: str) -> str:
        try:
            import winreg
        except ImportError as exc:
            raise OSError("The Windows registry is not available on this platform") from exc

        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key_path) as key:
            value, value_type = winreg.QueryValueEx(key, value_name)

        if value_type not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ) or not isinstance(value, str):
            raise OSError(f"Registry value {value_name!r} under {key_path!r} is not a string")
        return value


__all__ = ["RegistryReader", "WinregReader"]
