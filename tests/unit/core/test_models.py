"""Tests for the RobloxStudio record."""
from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from roblox_install.core.models import RobloxStudio


@pytest.fixture
def studio(tmp_path: Path) -> RobloxStudio:
    root = tmp_path / "Roblox"
    return RobloxStudio(
        root=root,
        application=root / "RobloxStudioBeta.exe",
        built_in_plugins=root / "BuiltInPlugins",
        plugins=tmp_path / "Plugins",
        content=root / "content",
    )


def test_accessors_return_fields(studio: RobloxStudio) -> None:
    assert studio.root_path == studio.root
    assert studio.application_path == studio.application
    assert studio.built_in_plugins_path == studio.built_in_plugins
    assert studio.plugins_path == studio.plugins
    assert studio.content_path == studio.content


def test_accessors_are_idempotent(studio: RobloxStudio) -> None:
    first = [studio.root_path, studio.application_path, studio.content_path]
    second = [studio.root_path, studio.application_path, studio.content_path]

    assert first == second


def test_accessors_do_not_touch_filesystem(studio: RobloxStudio) -> None:
    """Paths are conventions; none of them needs to exist."""
    assert not studio.plugins_path.exists()
    assert studio.plugins_path.name == "Plugins"


def test_record_is_immutable(studio: RobloxStudio) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        studio.root = Path("/elsewhere")  # type: ignore[misc]


def test_exe_path_is_deprecated(studio: RobloxStudio) -> None:
    with pytest.warns(DeprecationWarning, match="application_path"):
        assert studio.exe_path == studio.application


def test_to_dict(studio: RobloxStudio) -> None:
    data = studio.to_dict()

    assert set(data) == {"root", "application", "built_in_plugins", "plugins", "content"}
    assert data["application"] == str(studio.application)
    assert all(isinstance(value, str) for value in data.values())
