from __future__ import annotations

import dataclasses

import pytest

from textenc.config.flags import RuntimeFlags, get_runtime_flags, parse_xoptions


def _config(**warnings_section):
    return {"warnings": warnings_section}


def test_defaults() -> None:
    flags = RuntimeFlags.from_sources(environ={}, xoptions={}, config={})
    assert flags == RuntimeFlags(False, False, "default")


def test_flags_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        RuntimeFlags().warn_default_encoding = True  # type: ignore[misc]


def test_config_file_enables_warning() -> None:
    flags = RuntimeFlags.from_sources({}, {}, _config(warn_default_encoding=True, action="error"))
    assert flags.warn_default_encoding is True
    assert flags.warning_action == "error"


@pytest.mark.parametrize("value, expected", [("1", True), ("yes", True), ("", False)])
def test_environment_variable(value: str, expected: bool) -> None:
    flags = RuntimeFlags.from_sources({"PYTHONWARNDEFAULTENCODING": value}, {}, {})
    assert flags.warn_default_encoding is expected


def test_xoption_enables_warning() -> None:
    flags = RuntimeFlags.from_sources({}, {"warn_default_encoding": True}, {})
    assert flags.warn_default_encoding is True


def test_cli_switch_wins() -> None:
    flags = RuntimeFlags.from_sources(
        {"PYTHONWARNDEFAULTENCODING": "1"},
        {"warn_default_encoding": True},
        _config(warn_default_encoding=True),
        warn_default_encoding=False,
    )
    assert flags.warn_default_encoding is False


@pytest.mark.parametrize(
    "environ, xoptions, expected",
    [
        ({"PYTHONUTF8": "1"}, {}, True),
        ({"PYTHONUTF8": "0"}, {}, False),
        ({}, {"utf8": True}, True),
        ({"PYTHONUTF8": "1"}, {"utf8": "0"}, False),
    ],
)
def test_utf8_mode_sources(environ, xoptions, expected) -> None:
    assert RuntimeFlags.from_sources(environ, xoptions, {}).utf8_mode is expected


def test_with_overrides_ignores_none() -> None:
    flags = RuntimeFlags(warning_action="once")
    assert flags.with_overrides(warning_action=None) == flags
    assert flags.with_overrides(warn_default_encoding=True).warn_default_encoding is True


def test_parse_xoptions() -> None:
    assert parse_xoptions(["warn_default_encoding", "utf8=0", " dev "]) == {
        "warn_default_encoding": True,
        "utf8": "0",
        "dev": True,
    }


def test_runtime_flags_read_environment_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHONWARNDEFAULTENCODING", "1")
    first = get_runtime_flags()
    assert first.warn_default_encoding is True

    monkeypatch.delenv("PYTHONWARNDEFAULTENCODING")
    assert get_runtime_flags() is first
