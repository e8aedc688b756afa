from __future__ import annotations

from typing import Iterator, Optional

from ..settings import Settings, get_settings
from .base import SearchOutcome
from .client import SunXDCCClient


def get_client(settings: Settings | None = None) -> SunXDCCClient:
    settings = settings or get_settings()
    return SunXDCCClient(
        base_url=settings.base_url,
        request_timeout=settings.request_timeout,
        user_agent=settings.user_agent,
    )


def search(term: str, *, settings: Optional[Settings] = None) -> Iterator[SearchOutcome]:
    """Search SunXDCC for ``term``.

    The request is made before this returns; a failed request raises
    TransportError. The returned iterator yields SearchResult records and
    MalformedLineError values in response order::

        for outcome in sunxdcc.search("the hitchhiker's guide to the galaxy"):
            if isinstance(outcome, sunxdcc.MalformedLineError):
                continue
            print(outcome.trigger)
    """
    with get_client(settings) as client:
        return client.search(term)
