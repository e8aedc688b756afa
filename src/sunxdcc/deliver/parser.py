"""Parser for the plaintext SunXDCC response.

The body looks like::

    3 results
    EFnet|5|hitchhikers.guide.mp3|14MB|Bot1|/msg Bot1 xdcc send #1
    ...

The first line is a result count and is skipped without validation. Every
other non-blank line holds six ``|``-separated fields.
"""

from __future__ import annotations

from typing import Iterator

from ..errors import MalformedLineError
from .base import FIELD_COUNT, SearchOutcome, SearchResult

DELIMITER = "|"


def parse_line(line: str, lineno: int | None = None) -> SearchResult:
    """Parse one result line, raising MalformedLineError on a wrong field count."""
    fields = line.split(DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise MalformedLineError(line, lineno=lineno, field_count=len(fields))
    return SearchResult.from_fields(fields)


def parse_response(text: str) -> Iterator[SearchOutcome]:
    """Yield one outcome per non-blank line after the first.

    Outcomes are SearchResult records or MalformedLineError instances, in
    response order. Blank lines yield nothing; errors keep the line number
    from the raw response so their position stays meaningful.
    """
    # Split on "\n" only: filenames may contain \x0c, \x85 or \u2028.
    lines = [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]
    for lineno, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            yield parse_line(line, lineno=lineno)
        except MalformedLineError as exc:
            yield exc
