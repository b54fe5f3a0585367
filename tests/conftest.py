from __future__ import annotations

import os
from typing import Any, Optional

import pytest
import requests

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_result(
    name: str = "Baby",
    millis: Any = 214240,
    collection: Optional[str] = "My World 2.0",
    artwork: str = "https://is1-ssl.mzstatic.com/image/thumb/100x100bb.jpg",
    **extra: Any,
) -> dict:
    raw = {
        "wrapperType": "track",
        "kind": "song",
        "artistName": "Justin Bieber",
        "trackName": name,
        "artworkUrl100": artwork,
        "trackTimeMillis": millis,
    }
    if collection is not None:
        raw["collectionName"] = collection
    raw.update(extra)
    return raw


class FakeResponse:
    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        content: bytes = b"",
        text: Optional[str] = None,
    ) -> None:
        self.payload = payload
        self.status_code = status_code
        self.content = content
        self.text = text

    def json(self) -> Any:
        if self.text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload

    def raise_for_status(self) -> None:
        if not 200 <= self.status_code < 300:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for ``requests.Session``; records every call."""

    def __init__(self, response: Any = None, exc: Optional[Exception] = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, dict]] = []

    def get(self, url: str, **kwargs: Any) -> Any:
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def sample_payload() -> dict:
    return {
        "resultCount": 3,
        "results": [
            make_result("Baby", 214240, "My World 2.0"),
            make_result("Sorry", 200787, "Purpose (Deluxe)"),
            make_result("Peaches", 198082, None),
        ],
    }
