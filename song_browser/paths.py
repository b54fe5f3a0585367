from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional


def get_app_dir(package_dir: Optional[Path] = None) -> Path:
    """
    Returns directory for config/log files.

    - In dev: repo root (run.py / pyproject.toml location)
    - In PyInstaller: executable directory
    - Installed package: ~/.song_browser
    """
    if getattr(sys, "frozen", False):  # PyInstaller
        return Path(sys.executable).resolve().parent
    root = (package_dir or Path(__file__).resolve().parent).parent
    if (root / "pyproject.toml").is_file():
        return root
    return Path.home() / ".song_browser"


APP_DIR = get_app_dir()

CONFIG_FILE = APP_DIR / "config.json"
LOG_FILE = APP_DIR / "song_browser.log"
