from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from song_browser.errors import DecodeError


def _new_track_id() -> str:
    return uuid.uuid4().hex


def _require_str(raw: dict, key: str) -> str:
    if key not in raw:
        raise DecodeError(f"missing field {key!r}")
    value = raw[key]
    if not isinstance(value, str):
        raise DecodeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class Track:
    track_name: str
    artwork_url: str
    duration_millis: int
    collection_name: Optional[str] = None
    # Regenerated on every decode, never stable across fetches.
    track_id: str = field(default_factory=_new_track_id)

    @classmethod
    def from_json(cls, raw: Any) -> "Track":
        if not isinstance(raw, dict):
            raise DecodeError(f"result entry must be an object, got {type(raw).__name__}")

        name = _require_str(raw, "trackName")
        artwork = _require_str(raw, "artworkUrl100")

        if "trackTimeMillis" not in raw:
            raise DecodeError("missing field 'trackTimeMillis'")
        millis = raw["trackTimeMillis"]
        if isinstance(millis, bool) or not isinstance(millis, int):
            raise DecodeError("field 'trackTimeMillis' must be an integer")
        if millis < 0:
            raise DecodeError(f"field 'trackTimeMillis' must be >= 0, got {millis}")

        collection = raw.get("collectionName")
        if collection is not None and not isinstance(collection, str):
            raise DecodeError("field 'collectionName' must be a string or null")

        return cls(
            track_name=name,
            artwork_url=artwork,
            duration_millis=millis,
            collection_name=collection,
        )


@dataclass(frozen=True, slots=True)
class SearchResponse:
    results: tuple[Track, ...] = ()

    @classmethod
    def from_json(cls, payload: Any) -> "SearchResponse":
        if not isinstance(payload, dict):
            raise DecodeError("response body must be a JSON object")
        if "results" not in payload:
            raise DecodeError("missing field 'results'")
        results = payload["results"]
        if not isinstance(results, list):
            raise DecodeError("field 'results' must be a list")
        return cls(results=tuple(Track.from_json(r) for r in results))
