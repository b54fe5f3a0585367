from __future__ import annotations

import logging
import threading
from typing import Callable

from song_browser.errors import FetchError
from song_browser.services.artwork import ArtworkLoader
from song_browser.services.itunes import ITunesSearchClient

logger = logging.getLogger(__name__)


class FetchWorkers:
    """
    Runs searches and artwork downloads in background threads and emits UI
    events via callback. Nothing here touches UI state.
    """

    def __init__(
        self,
        emit_event: Callable[[dict], None],
        client: ITunesSearchClient,
        artwork: ArtworkLoader,
    ) -> None:
        self.emit_event = emit_event
        self.client = client
        self.artwork = artwork
        self._threads: list[threading.Thread] = []

    def _spawn(self, target, *args, name: str) -> threading.Thread:
        self._threads = [t for t in self._threads if t.is_alive()]
        th = threading.Thread(target=target, args=args, daemon=True, name=name)
        th.start()
        self._threads.append(th)
        return th

    def search(self, seq: int, term: str) -> threading.Thread:
        return self._spawn(self._run_search, seq, term, name=f"search-{seq}")

    def load_artwork(self, url: str) -> threading.Thread:
        return self._spawn(self._run_artwork, url, name="artwork")

    def join(self, timeout: float | None = None) -> None:
        for th in list(self._threads):
            th.join(timeout)

    def _run_search(self, seq: int, term: str) -> None:
        try:
            tracks = self.client.fetch(term)
        except FetchError as e:
            self.emit_event(
                {"type": "fetch_failed", "seq": seq, "kind": e.kind, "error": str(e)}
            )
            return
        except Exception as e:
            # loading must clear even on a bug in the decode path
            logger.exception("search %d crashed", seq)
            self.emit_event(
                {"type": "fetch_failed", "seq": seq, "kind": "internal", "error": str(e)}
            )
            return
        self.emit_event({"type": "fetch_done", "seq": seq, "tracks": tracks})

    def _run_artwork(self, url: str) -> None:
        try:
            data = self.artwork.load(url)
        except Exception:
            logger.exception("artwork %s crashed", url)
            data = None
        self.emit_event({"type": "artwork", "url": url, "data": data})
