"""
roblox-install CLI package.

- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- locate: The ``roblox-install`` command
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from ._output import OutputFormatter
from ._args import add_json_flag, add_verbose_flag


_STDERR_HANDLER: Optional[logging.Handler] = None


def configure_logging(verbose: bool) -> None:
    """Send library debug logging to stderr when ``verbose`` is set.

    Idempotent per-process: the stderr handler is installed at most once.
    """
    global _STDERR_HANDLER

    if not verbose or _STDERR_HANDLER is not None:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger("roblox_install")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    _STDERR_HANDLER = handler


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``roblox-install`` console script."""
    from roblox_install.cli import locate as locate_command

    parser = argparse.ArgumentParser(
        prog="roblox-install",
        description=locate_command.SUMMARY,
    )
    locate_command.register_args(parser)
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "verbose", False))
    return locate_command.main(args)


__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_verbose_flag",
    "configure_logging",
    "main",
]
