"""Tests for the resolution error hierarchy."""
from __future__ import annotations

import pytest

from roblox_install.core import exceptions as exc


@pytest.mark.parametrize(
    "error, message",
    [
        (exc.DocumentsDirectoryNotFound(), "Couldn't find Documents directory"),
        (exc.PluginsDirectoryNotFound(), "Couldn't find Plugins directory"),
        (exc.PlatformNotSupported(), "Your platform is not currently supported"),
        (exc.NotInstalled(), "Couldn't find Roblox Studio"),
        (
            exc.MalformedRegistry(),
            "The values of the registry keys used to find Roblox are malformed, "
            "maybe your Roblox installation is corrupt?",
        ),
        (exc.EnvironmentVariableError("bad value"), "environment variable misconfigured: bad value"),
    ],
)
def test_messages(error: exc.RobloxInstallError, message: str) -> None:
    assert str(error) == message
    assert isinstance(error, exc.RobloxInstallError)
    assert error.cause is None


def test_registry_error_message_includes_cause() -> None:
    cause = FileNotFoundError(2, "The system cannot find the file specified")

    try:
        raise exc.RegistryError(cause) from cause
    except exc.RegistryError as error:
        assert error.cause is cause
        assert str(error) == (
            "Couldn't find registry keys, Roblox might not be installed. "
            "([Errno 2] The system cannot find the file specified)"
        )



def test_registry_error_keeps_cause_without_raise_from() -> None:
    cause = PermissionError(13, "Access is denied")

    error = exc.RegistryError(cause)

    assert error.error is cause
    assert error.cause is cause
    assert error.__cause__ is cause


def test_environment_variable_error_keeps_reason() -> None:
    error = exc.EnvironmentVariableError("value is empty")

    assert error.reason == "value is empty"


def test_to_json_error() -> None:
    error = exc.NotInstalled(context={"root": "/opt/roblox"})

    assert error.to_json_error() == {
        "message": "Couldn't find Roblox Studio",
        "code": "NotInstalled",
        "context": {"root": "/opt/roblox"},
    }


def test_context_is_copied() -> None:
    context = {"root": "/opt/roblox"}
    error = exc.NotInstalled(context=context)
    context["root"] = "/changed"

    assert error.context == {"root": "/opt/roblox"}
