from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from song_browser.config import APP_TITLE, EVENT_PUMP_MS, THUMB_SIZE
from song_browser.state import LibraryState
from song_browser.ui.controller import LibraryController
from song_browser.ui.detail import TrackDetailView
from song_browser.ui.models import TrackTableModel
from song_browser.ui.style import load_qss
from song_browser.workers import FetchWorkers


class MainWindow(QMainWindow):
    PAGE_LIST = 0
    PAGE_DETAIL = 1

    def __init__(self, config_file: Path, workers: Optional[FetchWorkers] = None) -> None:
        super().__init__()

        self.setWindowTitle(APP_TITLE)
        self.setStyleSheet(load_qss())

        self._build_ui()

        # --- controller (SOURCE OF TRUTH) ---
        self.controller = LibraryController(
            config_file=config_file,
            on_state_changed=self._render_state,
            on_log=self._log,
            on_status_text=self._set_status,
            on_artwork=self._artwork_ready,
            workers=workers,
        )
        self.resize(*self.controller.window_size())

        # ------------------------------------------------------------------
        # MODEL
        # ------------------------------------------------------------------
        self.model = TrackTableModel(self.controller)
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QTableView.SelectRows)
        self.table.setSelectionMode(QTableView.SingleSelection)
        self.table.setShowGrid(False)
        self.table.verticalHeader().setVisible(False)
        self.table.verticalHeader().setDefaultSectionSize(THUMB_SIZE + 10)

        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.Fixed)
        header.setSectionResizeMode(1, QHeaderView.Stretch)
        header.setSectionResizeMode(2, QHeaderView.Stretch)
        header.setSectionResizeMode(3, QHeaderView.ResizeToContents)
        self.table.setColumnWidth(0, THUMB_SIZE + 10)

        self._wire()

        # ------------------------------------------------------------------
        # TIMERS
        # ------------------------------------------------------------------
        self.ev_timer = QTimer(self)
        self.ev_timer.timeout.connect(self.controller.process_ui_events)
        self.ev_timer.start(EVENT_PUMP_MS)

        self._render_state(self.controller.state)

    # -------------------- UI --------------------
    def _build_ui(self) -> None:
        self.pages = QStackedWidget(self)
        self.setCentralWidget(self.pages)

        list_page = QWidget()
        main = QVBoxLayout(list_page)
        main.setContentsMargins(18, 18, 18, 18)
        main.setSpacing(12)

        head = QHBoxLayout()
        head.addWidget(QLabel(APP_TITLE, objectName="Title"))
        head.addStretch(1)
        self.status = QLabel("", objectName="Sub")
        head.addWidget(self.status)
        self.btn_refresh = QPushButton("Refresh")
        self.btn_refresh.setObjectName("Primary")
        self.btn_refresh.setToolTip("Reload tracks (F5)")
        head.addWidget(self.btn_refresh)
        main.addLayout(head)

        # Loading card
        self.loading = QFrame(objectName="Card")
        ll = QVBoxLayout(self.loading)
        ll.setContentsMargins(16, 48, 16, 48)
        ll.addStretch(1)
        ll.addWidget(QLabel("Loading...", objectName="Title"))
        self.spinner = QProgressBar()
        self.spinner.setRange(0, 0)
        self.spinner.setTextVisible(False)
        ll.addWidget(self.spinner)
        ll.addStretch(1)
        main.addWidget(self.loading, 1)

        # Track table card
        self.list_card = QFrame(objectName="Card")
        lcl = QVBoxLayout(self.list_card)
        lcl.setContentsMargins(16, 16, 16, 16)
        lcl.setSpacing(10)
        lcl.addWidget(QLabel("Tracks (double click or Enter opens details)", objectName="Sub"))
        self.table = QTableView()
        lcl.addWidget(self.table, 1)
        main.addWidget(self.list_card, 1)

        # Log
        lc = QFrame(objectName="Card2")
        lgl = QVBoxLayout(lc)
        lgl.setContentsMargins(16, 16, 16, 16)
        lgl.setSpacing(10)
        lgl.addWidget(QLabel("Log", objectName="Sub"))
        self.log = QPlainTextEdit()
        self.log.setReadOnly(True)
        self.log.setMaximumBlockCount(600)
        self.log.setFixedHeight(110)
        lgl.addWidget(self.log)
        main.addWidget(lc)

        self.detail = TrackDetailView()

        self.pages.addWidget(list_page)
        self.pages.addWidget(self.detail)

    def _wire(self) -> None:
        self.btn_refresh.clicked.connect(self.controller.refresh)
        self.refresh_shortcut = QShortcut(QKeySequence("F5"), self)
        self.refresh_shortcut.activated.connect(self._refresh_if_idle)

        self.table.activated.connect(lambda idx: self._open_detail(idx.row()))
        self.detail.back_requested.connect(self._show_list)

    # -------------------- UI helpers --------------------
    def _log(self, msg: str) -> None:
        self.log.appendPlainText(msg)

    def _set_status(self, text: str) -> None:
        self.status.setText(text)

    def _render_state(self, state: LibraryState) -> None:
        self.loading.setVisible(state.is_loading)
        self.list_card.setVisible(not state.is_loading)
        self.btn_refresh.setEnabled(not state.is_busy)
        self.refresh_shortcut.setEnabled(not state.is_busy)
        self.btn_refresh.setText("Refreshing..." if state.refreshing else "Refresh")
        if hasattr(self, "model"):
            self.model.refresh()
        if self.pages.currentIndex() == self.PAGE_DETAIL and self.detail.track not in state.tracks:
            # list was replaced underneath the detail page
            self._show_list()

    def _artwork_ready(self, url: str, data: Optional[bytes]) -> None:
        self.model.artwork_ready(url)
        self.detail.artwork_ready(url, data)

    # -------------------- actions --------------------
    def _refresh_if_idle(self) -> None:
        if not self.controller.state.is_busy:
            self.controller.refresh()

    def _open_detail(self, row: int) -> None:
        t = self.model.track_at(row)
        if t is None:
            return
        self.detail.show_track(t, self.controller.artwork_for(t.artwork_url))
        self.pages.setCurrentIndex(self.PAGE_DETAIL)

    def _show_list(self) -> None:
        self.pages.setCurrentIndex(self.PAGE_LIST)

    # -------------------- lifecycle --------------------
    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.controller.start()

    def closeEvent(self, event) -> None:
        self.ev_timer.stop()
        self.controller.set_window_size(self.width(), self.height())
        self.controller.close()
        event.accept()


def run_qt(config_file: Path) -> None:
    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(config_file)
    win.show()
    sys.exit(app.exec())
