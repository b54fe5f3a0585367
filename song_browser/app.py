# song_browser/app.py
from __future__ import annotations

from song_browser.log import setup_logger
from song_browser.paths import CONFIG_FILE, LOG_FILE
from song_browser.ui.main_window import run_qt


def main() -> None:
    setup_logger(LOG_FILE)
    run_qt(CONFIG_FILE)
