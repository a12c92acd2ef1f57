from __future__ import annotations

import json
import warnings
from pathlib import Path

import pytest

from textenc.core import application
from textenc.core.application import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, run
from textenc.encoding import locale_encoding
from textenc.encoding.advisory import OmittedEncodingWarning


@pytest.fixture(autouse=True)
def quiet_app(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(application, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(locale_encoding.locale, "getpreferredencoding", lambda do_setlocale=True: "UTF-8")
    with warnings.catch_warnings(record=True) as records:
        warnings.simplefilter("always")
        yield records


def _omitted(records):
    return [r for r in records if issubclass(r.category, OmittedEncodingWarning)]


def test_resolve_explicit_encoding(capsys, quiet_app) -> None:
    assert run(["resolve", "UTF8"]) == EXIT_OK
    assert capsys.readouterr().out == "UTF8 -> utf-8\n"
    assert _omitted(quiet_app) == []


def test_resolve_default_is_silent_without_flag(capsys, quiet_app) -> None:
    assert run(["resolve"]) == EXIT_OK
    assert capsys.readouterr().out == "locale -> utf-8\n"
    assert _omitted(quiet_app) == []


def test_resolve_default_warns_with_flag(capsys, quiet_app) -> None:
    assert run(["--warn-default-encoding", "resolve"]) == EXIT_OK
    assert capsys.readouterr().out == "locale -> utf-8\n"
    omitted = _omitted(quiet_app)
    assert len(omitted) == 1
    assert omitted[0].filename == application.__file__


def test_environment_variable_enables_warning(monkeypatch, quiet_app) -> None:
    monkeypatch.setenv("PYTHONWARNDEFAULTENCODING", "1")
    assert run(["resolve"]) == EXIT_OK
    assert len(_omitted(quiet_app)) == 1


def test_xoption_utf8_mode(monkeypatch, capsys) -> None:
    monkeypatch.setattr(locale_encoding.locale, "getpreferredencoding", lambda do_setlocale=True: "cp1252")
    assert run(["-X", "utf8", "resolve"]) == EXIT_OK
    assert capsys.readouterr().out == "locale -> utf-8\n"


def test_resolve_auto(capsys) -> None:
    assert run(["resolve", "autodetect"]) == EXIT_OK
    assert capsys.readouterr().out == "auto -> detected from content\n"


def test_resolve_unknown_explicit_name_falls_back_to_auto(capsys) -> None:
    assert run(["resolve", "klingon-8"]) == EXIT_OK
    assert capsys.readouterr().out == "auto -> detected from content\n"


def test_cat_prints_file(tmp_path: Path, capsys) -> None:
    target = tmp_path / "note.txt"
    target.write_bytes("caf\xe9\n".encode("latin-1"))
    assert run(["cat", str(target), "--encoding", "latin-1"]) == EXIT_OK
    assert capsys.readouterr().out == "café\n"


def test_cat_decode_error_fails(tmp_path: Path) -> None:
    target = tmp_path / "note.txt"
    target.write_bytes(b"\xff\xfe\xfa")
    assert run(["cat", str(target), "--encoding", "utf-8"]) == EXIT_FAILURE


def test_cat_missing_file_fails(tmp_path: Path) -> None:
    assert run(["cat", str(tmp_path / "missing.txt"), "--encoding", "utf-8"]) == EXIT_FAILURE


def test_cat_error_action_turns_warning_into_failure(tmp_path: Path, capsys) -> None:
    target = tmp_path / "note.txt"
    target.write_bytes(b"text\n")
    code = run(["--warn-default-encoding", "--warning-action", "error", "cat", str(target)])
    assert code == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_scan_exit_codes(tmp_path: Path, capsys) -> None:
    dirty = tmp_path / "dirty.py"
    dirty.write_text("open('x')\n", encoding="utf-8")
    clean = tmp_path / "clean.py"
    clean.write_text("open('x', 'rb')\n", encoding="utf-8")

    assert run(["scan", str(clean), "--no-progress"]) == EXIT_OK
    capsys.readouterr()

    assert run(["scan", str(dirty), "--no-progress", "--format", "json"]) == EXIT_FAILURE
    report = json.loads(capsys.readouterr().out)
    assert report["summary"]["findings"] == 1


def test_scan_uses_config_defaults(tmp_path: Path, capsys) -> None:
    config = tmp_path / "config.toml"
    config.write_text('[scan]\nformat = "yaml"\nexclude_folders = ["vendor"]\n', encoding="utf-8")
    (tmp_path / "src" / "vendor").mkdir(parents=True)
    (tmp_path / "src" / "vendor" / "lib.py").write_text("open('x')\n", encoding="utf-8")

    assert run(["--config", str(config), "scan", str(tmp_path / "src"), "--no-progress"]) == EXIT_OK
    assert "files_scanned: 0" in capsys.readouterr().out


def test_config_file_enables_warning(tmp_path: Path, quiet_app) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[warnings]\nwarn_default_encoding = true\n", encoding="utf-8")
    assert run(["--config", str(config), "resolve"]) == EXIT_OK
    assert len(_omitted(quiet_app)) == 1

    quiet_app.clear()
    assert run(["--config", str(config), "--no-warn-default-encoding", "resolve"]) == EXIT_OK
    assert _omitted(quiet_app) == []


def test_config_validate(tmp_path: Path, capsys) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[warnings]\naction = \"once\"\n", encoding="utf-8")
    assert run(["--config", str(config), "--config-validate"]) == EXIT_OK
    assert capsys.readouterr().out == "Configuration is valid.\n"


def test_invalid_config_is_usage_error(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[warnings]\naction = \"shout\"\n", encoding="utf-8")
    assert run(["--config", str(config), "resolve"]) == EXIT_USAGE
