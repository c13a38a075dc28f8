"""CLI output formatting for resolved installs and resolution errors.

Results go to stdout and errors to stderr, either as JSON or as
labelled text lines.
"""
from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roblox_install.core.exceptions import RobloxInstallError
    from roblox_install.core.models import RobloxStudio


# Text labels, in display order, for the keys of ``RobloxStudio.to_dict()``.
PATH_LABELS = (
    ("root", "Root"),
    ("application", "Application"),
    ("content", "Content"),
    ("built_in_plugins", "Built-in plugins"),
    ("plugins", "Plugins"),
)


class OutputFormatter:
    """Render ``roblox-install`` results in JSON or text mode."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def paths(self, studio: RobloxStudio) -> None:
        """Print every path of a resolved installation to stdout."""
        paths = studio.to_dict()
        if self.json_mode:
            print(json.dumps(paths, indent=self.indent))
            return

        print("Roblox Studio")
        print()
        for key, label in PATH_LABELS:
            print(f"  {label}: {paths[key]}")

    def error(self, error: RobloxInstallError) -> None:
        """Print a resolution failure to stderr.

        In JSON mode the payload carries the exception class name under
        ``error`` along with its message and context.
        """
        if self.json_mode:
            payload = error.to_json_error()
            output = {
                "error": payload["code"],
                "message": payload["message"],
                "context": payload["context"],
            }
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {error}", file=sys.stderr)
