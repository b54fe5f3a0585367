from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional

from song_browser.models import Track


class Phase(enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(slots=True)
class LibraryState:
    """
    Track list + loading flags, written only from the UI thread.

    Every fetch takes a sequence number; only the latest one may write
    results. Older completions are dropped.
    """

    phase: Phase = Phase.LOADING
    refreshing: bool = False
    tracks: tuple[Track, ...] = ()
    last_error: Optional[str] = None
    _seq: int = field(default=0, repr=False)

    @property
    def latest_seq(self) -> int:
        return self._seq

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def is_busy(self) -> bool:
        return self.is_loading or self.refreshing

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def begin_load(self) -> int:
        self.phase = Phase.LOADING
        self.refreshing = False
        return self._next_seq()

    def begin_refresh(self) -> int:
        # refreshing is a substate of LOADED; a refresh during the initial
        # load just supersedes it.
        if self.phase is Phase.LOADED:
            self.refreshing = True
        return self._next_seq()

    def is_current(self, seq: int) -> bool:
        return seq == self._seq

    def complete(self, seq: int, tracks: Iterable[Track]) -> bool:
        if not self.is_current(seq):
            return False
        self.tracks = tuple(tracks)
        self.last_error = None
        self._settle()
        return True

    def fail(self, seq: int, error: str) -> bool:
        if not self.is_current(seq):
            return False
        self.tracks = ()
        self.last_error = error
        self._settle()
        return True

    def _settle(self) -> None:
        self.phase = Phase.LOADED
        self.refreshing = False
