from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from song_browser.models import Track  # noqa: E402
from song_browser.ui.controller import LibraryController  # noqa: E402
from song_browser.ui.models import UNKNOWN_ARTIST, TrackTableModel  # noqa: E402


class _Workers:
    def __init__(self) -> None:
        self.artwork: list[str] = []

    def search(self, seq: int, term: str) -> None:
        pass

    def load_artwork(self, url: str) -> None:
        self.artwork.append(url)


@pytest.fixture(scope="module")
def qapp() -> Any:
    return QApplication.instance() or QApplication([])


@pytest.fixture
def controller(tmp_path: Path, qapp: Any) -> Any:
    c = LibraryController(
        config_file=tmp_path / "config.json",
        on_state_changed=lambda s: None,
        on_log=lambda m: None,
        on_status_text=lambda t: None,
        on_artwork=lambda u, d: None,
        workers=_Workers(),  # type: ignore[arg-type]
    )
    c.start()
    c.ui_events.put(
        {
            "type": "fetch_done",
            "seq": 1,
            "tracks": [
                Track("Baby", "https://x/1.jpg", 214240, "My World 2.0"),
                Track("Peaches", "https://x/2.jpg", 3725000, None),
            ],
        }
    )
    c.process_ui_events()
    yield c
    c.close()


def test_rows_and_columns(controller: LibraryController) -> None:
    model = TrackTableModel(controller)
    assert model.rowCount() == 2
    assert model.columnCount() == 4
    assert model.headerData(1, Qt.Horizontal) == "Title"


def test_display_values(controller: LibraryController) -> None:
    model = TrackTableModel(controller)

    assert model.data(model.index(0, 1)) == "Baby"
    assert model.data(model.index(0, 2)) == "My World 2.0"
    assert model.data(model.index(0, 3)) == "03:34"
    assert model.data(model.index(1, 2)) == UNKNOWN_ARTIST
    assert model.data(model.index(1, 3)) == "62:05"


def test_missing_artwork_gives_no_decoration(controller: LibraryController) -> None:
    model = TrackTableModel(controller)

    assert model.data(model.index(0, 0), Qt.DecorationRole) is None
    assert controller.workers.artwork == ["https://x/1.jpg"]  # type: ignore[attr-defined]

    controller.ui_events.put({"type": "artwork", "url": "https://x/1.jpg", "data": b"not an image"})
    controller.process_ui_events()
    assert model.data(model.index(0, 0), Qt.DecorationRole) is None


def test_track_at(controller: LibraryController) -> None:
    model = TrackTableModel(controller)
    assert model.track_at(1).track_name == "Peaches"
    assert model.track_at(5) is None
