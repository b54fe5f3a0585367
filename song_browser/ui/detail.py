from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from song_browser.config import ARTWORK_SIZE
from song_browser.formatting import format_duration
from song_browser.models import Track
from song_browser.playback import InertTransport
from song_browser.ui.models import pixmap_from_bytes


class TrackDetailView(QWidget):
    """Static detail page. The slider and transport row are decoration only."""

    back_requested = Signal()

    def __init__(self, transport: Optional[InertTransport] = None, parent=None) -> None:
        super().__init__(parent)
        self.transport = transport or InertTransport()
        self.track: Optional[Track] = None

        self._build_ui()
        self._wire()

    # -------------------- UI --------------------
    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(18, 18, 18, 18)
        root.setSpacing(12)

        top = QHBoxLayout()
        self.btn_back = QPushButton("‹ Songs")
        top.addWidget(self.btn_back)
        top.addStretch(1)
        root.addLayout(top)

        card = QFrame(objectName="DetailCard")
        c = QVBoxLayout(card)
        c.setContentsMargins(24, 24, 24, 24)
        c.setSpacing(8)
        c.addStretch(1)

        self.artwork = QLabel(objectName="Artwork")
        self.artwork.setFixedSize(ARTWORK_SIZE, ARTWORK_SIZE)
        self.artwork.setAlignment(Qt.AlignCenter)
        c.addWidget(self.artwork, 0, Qt.AlignHCenter)
        c.addSpacing(40)

        self.title = QLabel("", objectName="Title")
        self.title.setWordWrap(True)
        self.title.setAlignment(Qt.AlignCenter)
        self.collection = QLabel("", objectName="Sub")
        self.collection.setAlignment(Qt.AlignCenter)
        self.duration = QLabel("", objectName="Caption")
        self.duration.setAlignment(Qt.AlignCenter)
        c.addWidget(self.title)
        c.addWidget(self.collection)
        c.addWidget(self.duration)
        c.addSpacing(40)

        # fixed at the midpoint, not bound to anything
        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, 100)
        self.slider.setValue(50)
        self.slider.setEnabled(False)
        c.addWidget(self.slider)

        times = QHBoxLayout()
        times.addWidget(QLabel("1:30", objectName="Caption"))
        times.addStretch(1)
        times.addWidget(QLabel("3:45", objectName="Caption"))
        c.addLayout(times)
        c.addSpacing(20)

        tr = QHBoxLayout()
        tr.setSpacing(60)
        tr.addStretch(1)
        self.btn_prev = QPushButton("⏮", objectName="Transport")
        self.btn_play = QPushButton("⏯", objectName="TransportMain")
        self.btn_next = QPushButton("⏭", objectName="Transport")
        tr.addWidget(self.btn_prev)
        tr.addWidget(self.btn_play)
        tr.addWidget(self.btn_next)
        tr.addStretch(1)
        c.addLayout(tr)
        c.addStretch(1)

        root.addWidget(card, 1)

    def _wire(self) -> None:
        self.btn_back.clicked.connect(self.back_requested.emit)
        self.btn_prev.clicked.connect(lambda: self.transport.previous())
        self.btn_play.clicked.connect(lambda: self.transport.play_pause())
        self.btn_next.clicked.connect(lambda: self.transport.next())

    # -------------------- data --------------------
    def show_track(self, track: Track, artwork: Optional[bytes] = None) -> None:
        self.track = track
        self.title.setText(track.track_name)
        self.collection.setText(track.collection_name or "")
        self.duration.setText(f"Duration: {format_duration(track.duration_millis)}")
        self._set_artwork(artwork)

    def artwork_ready(self, url: str, data: Optional[bytes]) -> None:
        if self.track is not None and self.track.artwork_url == url:
            self._set_artwork(data)

    def _set_artwork(self, data: Optional[bytes]) -> None:
        pm = pixmap_from_bytes(data, ARTWORK_SIZE)
        if pm is None:
            # grey placeholder comes from the stylesheet
            self.artwork.clear()
            return
        self.artwork.setPixmap(pm)
