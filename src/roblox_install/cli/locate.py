"""
roblox-install locate command.

SUMMARY: Show the paths of the installed Roblox Studio
"""
from __future__ import annotations

import argparse

from roblox_install.cli._args import add_json_flag, add_verbose_flag
from roblox_install.cli._output import OutputFormatter

SUMMARY = "Show the paths of the installed Roblox Studio"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)
    add_verbose_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Locate Roblox Studio and print its paths."""
    from roblox_install.core.exceptions import RobloxInstallError
    from roblox_install.core.locator import locate

    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        studio = locate()
    except RobloxInstallError as e:
        formatter.error(e)
        return 1

    formatter.paths(studio)
    return 0
