from __future__ import annotations

import logging
from typing import Iterator, Optional

import httpx

from ..errors import TransportError
from .base import SearchOutcome
from .parser import parse_response

logger = logging.getLogger(__name__)

BASE_URL = "https://sunxdcc.com/deliver.php"
DEFAULT_USER_AGENT = "sunxdcc-py/0.1"


class SunXDCCClient:
    """Blocking client for the SunXDCC search endpoint.

    Each search is one GET with the term in the ``sterm`` query parameter.
    There is no retry: any transport failure surfaces as TransportError.
    Redirects are followed. An ``http`` client passed in by the caller is
    used as-is and not closed.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        request_timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self._owns_http = http is None
        self._client = http or httpx.Client(
            timeout=request_timeout,
            headers={
                "User-Agent": user_agent,
                "Accept": "text/plain",
            },
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        if self._owns_http:
            self._client.close()

    def __enter__(self) -> "SunXDCCClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    def fetch(self, term: str) -> str:
        """Return the raw response body for ``term``."""
        if not term or not term.strip():
            raise ValueError("search term must not be empty")
        logger.debug("GET %s sterm=%r", self.base_url, term)
        try:
            resp = self._client.get(self.base_url, params={"sterm": term})
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"SunXDCC search for {term!r} failed: {exc}") from exc
        return resp.text

    def search(self, term: str) -> Iterator[SearchOutcome]:
        # Fetch eagerly so a transport failure raises here, before iteration.
        text = self.fetch(term)
        return parse_response(text)
