"""Tests for CLI output formatting."""
from __future__ import annotations

import json
from pathlib import Path

import pytest


def _studio(root: Path):
    from roblox_install.core.models import RobloxStudio

    return RobloxStudio(
        root=root,
        application=root / "RobloxStudioBeta.exe",
        built_in_plugins=root / "BuiltInPlugins",
        plugins=root.parent / "Plugins",
        content=root / "content",
    )


class TestOutputFormatter:
    def test_text_paths_follow_label_order(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        from roblox_install.cli._output import PATH_LABELS, OutputFormatter

        OutputFormatter().paths(_studio(tmp_path / "Roblox"))

        lines = capsys.readouterr().out.splitlines()
        assert lines[:2] == ["Roblox Studio", ""]
        assert [line.split(":", 1)[0].strip() for line in lines[2:]] == [label for _, label in PATH_LABELS]

    def test_labels_cover_every_path(self, tmp_path: Path) -> None:
        from roblox_install.cli._output import PATH_LABELS

        assert {key for key, _ in PATH_LABELS} == set(_studio(tmp_path).to_dict())

    def test_json_paths(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        from roblox_install.cli._output import OutputFormatter

        studio = _studio(tmp_path / "Roblox")
        OutputFormatter(json_mode=True).paths(studio)

        assert json.loads(capsys.readouterr().out) == studio.to_dict()

    def test_json_error_includes_context(self, capsys: pytest.CaptureFixture) -> None:
        from roblox_install.cli._output import OutputFormatter
        from roblox_install.core.exceptions import NotInstalled

        OutputFormatter(json_mode=True).error(NotInstalled(context={"root": "/opt/roblox"}))

        captured = capsys.readouterr()
        payload = json.loads(captured.err)
        assert captured.out == ""
        assert payload["error"] == "NotInstalled"
        assert payload["context"] == {"root": "/opt/roblox"}

    def test_text_error(self, capsys: pytest.CaptureFixture) -> None:
        from roblox_install.cli._output import OutputFormatter
        from roblox_install.core.exceptions import EnvironmentVariableError

        OutputFormatter().error(EnvironmentVariableError("value is empty"))

        assert capsys.readouterr().err == "Error: environment variable misconfigured: value is empty\n"
