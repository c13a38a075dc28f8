"""Test helper modules for the roblox_install test suite.

- installs: Builders for fake Roblox Studio installation trees
- fakes: Test doubles for registry access
- cache_utils: Cache reset utilities for test isolation
"""
from __future__ import annotations
