"""Allow ``python -m roblox_install``."""
import sys

from roblox_install.cli import main

if __name__ == "__main__":
    sys.exit(main())
