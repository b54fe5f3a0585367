from __future__ import annotations

import logging
import queue as thread_queue
from pathlib import Path
from typing import Callable, Optional

from song_browser.config import DEFAULT_CONFIG, DEFAULT_SEARCH_TERM, REQUEST_TIMEOUT_SEC
from song_browser.log import attach_sink, detach_sink
from song_browser.models import Track
from song_browser.services.artwork import ArtworkLoader
from song_browser.services.itunes import ITunesSearchClient
from song_browser.state import LibraryState
from song_browser.storage import load_config, save_json
from song_browser.workers import FetchWorkers

logger = logging.getLogger(__name__)


class LibraryController:
    """
    Owns the track list state.

    - Worker threads only post events to ``ui_events``
    - ``process_ui_events`` runs on the UI thread and is the single writer
    - A fetch failure ends in an empty list with loading cleared, never a crash
    """

    # -------------------- init --------------------
    def __init__(
        self,
        config_file: Path,
        on_state_changed: Callable[[LibraryState], None],
        on_log: Callable[[str], None],
        on_status_text: Callable[[str], None],
        on_artwork: Callable[[str, Optional[bytes]], None],
        workers: Optional[FetchWorkers] = None,
    ) -> None:
        self.config_file = config_file

        self.on_state_changed = on_state_changed
        self.on_log = on_log
        self.on_status_text = on_status_text
        self.on_artwork = on_artwork

        self.ui_events: "thread_queue.Queue[dict]" = thread_queue.Queue()
        self.state = LibraryState()
        self._started = False
        self._closing = False

        self._artwork: dict[str, bytes] = {}
        self._artwork_pending: set[str] = set()
        self._artwork_broken: set[str] = set()

        self.config_data: dict = {}
        self._load_config()

        if workers is None:
            timeout = self.request_timeout
            workers = FetchWorkers(
                emit_event=self.ui_events.put,
                client=ITunesSearchClient(timeout=timeout),
                artwork=ArtworkLoader(timeout=timeout),
            )
        self.workers = workers

        self._log_handler = attach_sink(
            lambda msg: self.ui_events.put({"type": "log", "msg": msg})
        )

    # ======================================================================
    # CONFIG
    # ======================================================================

    def _load_config(self) -> None:
        self.config_data = load_config(self.config_file, DEFAULT_CONFIG)

    @property
    def search_term(self) -> str:
        term = self.config_data.get("search_term")
        if isinstance(term, str) and term.strip():
            return term
        return DEFAULT_SEARCH_TERM

    @property
    def request_timeout(self) -> float:
        try:
            value = float(self.config_data.get("request_timeout", REQUEST_TIMEOUT_SEC))
        except (TypeError, ValueError):
            return float(REQUEST_TIMEOUT_SEC)
        return value if value > 0 else float(REQUEST_TIMEOUT_SEC)

    def window_size(self) -> tuple[int, int]:
        win = self.config_data.get("window") or {}
        try:
            return int(win.get("width", 900)), int(win.get("height", 680))
        except (TypeError, ValueError, AttributeError):
            return 900, 680

    def set_window_size(self, width: int, height: int) -> None:
        self.config_data["window"] = {"width": int(width), "height": int(height)}

    def save_config(self) -> None:
        save_json(self.config_file, self.config_data)

    # ======================================================================
    # PUBLIC UI API
    # ======================================================================

    def start(self) -> None:
        """First appearance of the list: kick off the initial load once."""
        if self._started or self._closing:
            return
        self._started = True
        seq = self.state.begin_load()
        self.on_status_text("Loading...")
        self.on_state_changed(self.state)
        logger.info("Loading tracks for %r", self.search_term)
        self.workers.search(seq, self.search_term)

    def refresh(self) -> None:
        if self._closing:
            return
        if not self._started:
            self.start()
            return
        seq = self.state.begin_refresh()
        self.on_status_text("Refreshing...")
        self.on_state_changed(self.state)
        logger.info("Refreshing tracks (request %d)", seq)
        self.workers.search(seq, self.search_term)

    def track_at(self, row: int) -> Optional[Track]:
        if 0 <= row < len(self.state.tracks):
            return self.state.tracks[row]
        return None

    def artwork_for(self, url: str) -> Optional[bytes]:
        """Cached artwork bytes, or ``None`` while loading / when broken."""
        if url in self._artwork:
            return self._artwork[url]
        if self._closing or url in self._artwork_pending or url in self._artwork_broken:
            return None
        self._artwork_pending.add(url)
        self.workers.load_artwork(url)
        return None

    def _prune_artwork(self) -> None:
        """Keep cached artwork only for the tracks now on screen.

        Broken URLs get another chance after each successful fetch.
        """
        live = {t.artwork_url for t in self.state.tracks}
        self._artwork = {u: d for u, d in self._artwork.items() if u in live}
        self._artwork_broken.clear()

    # ======================================================================
    # EVENT PUMP
    # ======================================================================

    def process_ui_events(self) -> None:
        if self._closing:
            return

        dirty = False

        try:
            while True:
                ev = self.ui_events.get_nowait()
                et = ev.get("type")

                if et == "log":
                    self.on_log(str(ev.get("msg", "")))

                elif et == "fetch_done":
                    tracks = ev.get("tracks") or []
                    if self.state.complete(ev["seq"], tracks):
                        self._prune_artwork()
                        self.on_status_text(
                            f"{len(self.state.tracks)} tracks" if self.state.tracks else "No tracks"
                        )
                        dirty = True
                    else:
                        logger.debug("dropping stale result of request %s", ev["seq"])

                elif et == "fetch_failed":
                    kind = ev.get("kind", "fetch")
                    logger.warning("Failed to fetch data (%s): %s", kind, ev.get("error"))
                    if self.state.fail(ev["seq"], f"{kind}: {ev.get('error')}"):
                        self.on_status_text("Could not load tracks")
                        dirty = True
                    else:
                        logger.debug("dropping stale failure of request %s", ev["seq"])

                elif et == "artwork":
                    url = ev.get("url", "")
                    data = ev.get("data")
                    self._artwork_pending.discard(url)
                    if data:
                        self._artwork[url] = data
                    else:
                        self._artwork_broken.add(url)
                    self.on_artwork(url, data)

        except thread_queue.Empty:
            pass

        if dirty:
            self.on_state_changed(self.state)

    # ======================================================================
    # CLOSE
    # ======================================================================

    def close(self) -> None:
        if self._closing:
            return
        self._closing = True
        self.save_config()
        detach_sink(self._log_handler)
