from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """Any failure of one search request/response/decode cycle."""

    kind = "fetch"


class NetworkError(FetchError):
    """Endpoint unreachable: DNS, refused connection, timeout."""

    kind = "network"


class HttpStatusError(FetchError):
    kind = "http"

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = int(status_code)
        super().__init__(message or f"HTTP {self.status_code}")


class DecodeError(FetchError):
    """Response body is not JSON or does not match the expected shape."""

    kind = "decode"
