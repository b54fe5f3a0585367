from __future__ import annotations

APP_TITLE = "Songs"

SEARCH_URL = "https://itunes.apple.com/search"
DEFAULT_SEARCH_TERM = "Justin beiber"
REQUEST_TIMEOUT_SEC = 15

USER_AGENT = "SongBrowser/1.0 (+https://itunes.apple.com/search)"

# UI event pump
EVENT_PUMP_MS = 100

THUMB_SIZE = 100
ARTWORK_SIZE = 300

DEFAULT_CONFIG = {
    "search_term": DEFAULT_SEARCH_TERM,
    "request_timeout": REQUEST_TIMEOUT_SEC,
    "window": {"width": 900, "height": 680},
}
