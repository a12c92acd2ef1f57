from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from textenc.config.flags import get_runtime_flags


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    base = tmp_path / "env"
    monkeypatch.setenv("HOME", str(base / "home"))
    monkeypatch.setenv("APPDATA", str(base / "appdata"))
    monkeypatch.delenv("PYTHONWARNDEFAULTENCODING", raising=False)
    monkeypatch.delenv("PYTHONUTF8", raising=False)
    get_runtime_flags.cache_clear()
    yield
    get_runtime_flags.cache_clear()
