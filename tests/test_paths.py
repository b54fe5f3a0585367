from __future__ import annotations

import sys
from pathlib import Path

import pytest

from song_browser.paths import get_app_dir


def test_checkout_uses_repo_root(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n", encoding="utf-8")
    pkg = tmp_path / "song_browser"
    pkg.mkdir()

    assert get_app_dir(pkg) == tmp_path


def test_installed_package_uses_home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    site = tmp_path / "site-packages"
    pkg = site / "song_browser"
    pkg.mkdir(parents=True)
    home = tmp_path / "home"
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))

    assert get_app_dir(pkg) == home / ".song_browser"


def test_frozen_uses_executable_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "executable", str(tmp_path / "SongBrowser.exe"))

    assert get_app_dir(tmp_path / "whatever") == tmp_path.resolve()
