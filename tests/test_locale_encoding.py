from __future__ import annotations

import warnings

import pytest

from textenc.config.flags import RuntimeFlags
from textenc.encoding import locale_encoding
from textenc.encoding.locale_encoding import effective_encoding, is_locale_selector
from textenc.exceptions import UnknownEncodingError


def test_locale_uses_preferred_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(locale_encoding.locale, "getpreferredencoding", lambda do_setlocale=True: "cp1252")
    assert effective_encoding("locale", RuntimeFlags()) == "cp1252"


def test_locale_in_utf8_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(locale_encoding.locale, "getpreferredencoding", lambda do_setlocale=True: "cp1252")
    assert effective_encoding("LOCALE", RuntimeFlags(utf8_mode=True)) == "utf-8"


def test_locale_sentinel_does_not_warn() -> None:
    flags = RuntimeFlags(warn_default_encoding=True)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        effective_encoding("locale", flags)


def test_explicit_names_are_canonical() -> None:
    assert effective_encoding("UTF8") == "utf-8"
    assert effective_encoding("latin_1") == "iso8859-1"


def test_unknown_encoding() -> None:
    with pytest.raises(UnknownEncodingError) as excinfo:
        effective_encoding("klingon-8")
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.encoding == "klingon-8"


def test_unresolved_selector_rejected() -> None:
    with pytest.raises(ValueError):
        effective_encoding(None)


@pytest.mark.parametrize(
    "selector, expected",
    [("locale", True), (" Locale ", True), ("utf-8", False), (None, False)],
)
def test_is_locale_selector(selector, expected) -> None:
    assert is_locale_selector(selector) is expected
