from __future__ import annotations

import logging
from typing import Optional

import requests

from song_browser.config import REQUEST_TIMEOUT_SEC, SEARCH_URL, USER_AGENT
from song_browser.errors import DecodeError, HttpStatusError, NetworkError
from song_browser.models import SearchResponse, Track

logger = logging.getLogger(__name__)


class ITunesSearchClient:
    """
    One search = one GET + one JSON decode. No caching, first page only.
    """

    def __init__(
        self,
        url: str = SEARCH_URL,
        timeout: float = REQUEST_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, term: str) -> list[Track]:
        if not isinstance(term, str) or not term.strip():
            raise ValueError("search term must be a non-empty string")

        logger.debug("GET %s term=%r", self.url, term)
        try:
            r = self.session.get(
                self.url,
                params={"term": term},
                timeout=self.timeout,
                headers={"user-agent": USER_AGENT, "accept": "application/json"},
            )
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        if not 200 <= r.status_code < 300:
            raise HttpStatusError(r.status_code, f"HTTP {r.status_code} from {self.url}")

        try:
            payload = r.json()
        except ValueError as e:
            raise DecodeError(f"response is not JSON: {e}") from e

        tracks = list(SearchResponse.from_json(payload).results)
        logger.info("Search %r returned %d tracks", term, len(tracks))
        return tracks
