from __future__ import annotations

import logging
from typing import Optional

import requests

from song_browser.config import REQUEST_TIMEOUT_SEC, USER_AGENT

logger = logging.getLogger(__name__)


class ArtworkLoader:
    """
    Downloads artwork bytes. Broken or unreachable URLs give ``None``.
    """

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def load(self, url: str) -> Optional[bytes]:
        if not url or not url.lower().startswith(("http://", "https://")):
            logger.debug("skip artwork, not an http url: %r", url)
            return None
        try:
            r = self.session.get(
                url,
                timeout=self.timeout,
                headers={"user-agent": USER_AGENT},
            )
            r.raise_for_status()
        except requests.RequestException as e:
            logger.debug("artwork %s failed: %s", url, e)
            return None
        return r.content or None
