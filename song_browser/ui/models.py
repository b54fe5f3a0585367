from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QSize, Qt
from PySide6.QtGui import QPixmap

from song_browser.config import THUMB_SIZE
from song_browser.formatting import format_duration
from song_browser.models import Track
from song_browser.ui.controller import LibraryController

UNKNOWN_ARTIST = "Unknown Artist"


def pixmap_from_bytes(data: Optional[bytes], size: int) -> Optional[QPixmap]:
    if not data:
        return None
    pm = QPixmap()
    if not pm.loadFromData(data):
        return None
    return pm.scaled(
        size, size, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation
    )


class TrackTableModel(QAbstractTableModel):
    COLS = ("", "Title", "Artist", "Duration")

    def __init__(self, controller: LibraryController) -> None:
        super().__init__()
        self.controller = controller
        self._thumbs: dict[str, QPixmap] = {}

    @property
    def tracks(self) -> tuple[Track, ...]:
        return self.controller.state.tracks

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self.tracks)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self.COLS)

    def headerData(
        self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole
    ):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return self.COLS[section]
        return str(section + 1)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        if not index.isValid():
            return None
        r = index.row()
        c = index.column()
        if r < 0 or r >= len(self.tracks):
            return None
        t = self.tracks[r]

        if role == Qt.DisplayRole:
            if c == 1:
                return t.track_name
            if c == 2:
                return t.collection_name or UNKNOWN_ARTIST
            if c == 3:
                return format_duration(t.duration_millis)
        if role == Qt.DecorationRole and c == 0:
            return self._thumb(t.artwork_url)
        if role == Qt.SizeHintRole and c == 0:
            return QSize(THUMB_SIZE, THUMB_SIZE)
        if role == Qt.ToolTipRole and c == 1:
            return t.track_name
        if role == Qt.TextAlignmentRole:
            if c == 3:
                return int(Qt.AlignCenter)
            return int(Qt.AlignVCenter | Qt.AlignLeft)
        return None

    def _thumb(self, url: str) -> Optional[QPixmap]:
        if url in self._thumbs:
            return self._thumbs[url]
        pm = pixmap_from_bytes(self.controller.artwork_for(url), THUMB_SIZE)
        if pm is not None:
            self._thumbs[url] = pm
        return pm

    def refresh(self) -> None:
        self.beginResetModel()
        live = {t.artwork_url for t in self.tracks}
        self._thumbs = {u: pm for u, pm in self._thumbs.items() if u in live}
        self.endResetModel()

    def artwork_ready(self, url: str) -> None:
        for row, t in enumerate(self.tracks):
            if t.artwork_url == url:
                idx = self.index(row, 0)
                self.dataChanged.emit(idx, idx, [Qt.DecorationRole])

    def track_at(self, row: int) -> Track | None:
        return self.controller.track_at(row)
