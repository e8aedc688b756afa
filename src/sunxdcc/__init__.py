"""Unofficial client for the SunXDCC XDCC search engine."""

from .errors import MalformedLineError, SunXDCCError, TransportError
from .deliver.base import SearchOutcome, SearchResult
from .deliver.client import BASE_URL, SunXDCCClient
from .deliver.clients import get_client, search
from .deliver.parser import parse_line, parse_response

__version__ = "0.1.0"

__all__ = [
    "BASE_URL",
    "MalformedLineError",
    "SearchOutcome",
    "SearchResult",
    "SunXDCCClient",
    "SunXDCCError",
    "TransportError",
    "get_client",
    "parse_line",
    "parse_response",
    "search",
]
