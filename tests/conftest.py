import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'roblox_install'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.cache_utils import reset_roblox_install_caches
from helpers.fakes import FakeRegistryReader


@pytest.fixture(autouse=True)
def _isolate_locator_env(monkeypatch):
    """Keep a developer's ROBLOX_STUDIO_PATH out of every test."""
    monkeypatch.delenv("ROBLOX_STUDIO_PATH", raising=False)
    reset_roblox_install_caches()
    yield
    reset_roblox_install_caches()


@pytest.fixture
def settings():
    """Bundled locator settings."""
    from roblox_install.core.config import load_settings

    return load_settings()


@pytest.fixture
def fake_registry():
    """Factory for FakeRegistryReader instances."""
    return FakeRegistryReader


@pytest.fixture
def no_home(monkeypatch):
    """Make the OS home directory lookup fail."""

    def _raise() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(_raise))
    for name in ("HOME", "USERPROFILE"):
        monkeypatch.delenv(name, raising=False)
