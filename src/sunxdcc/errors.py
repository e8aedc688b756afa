"""Exception hierarchy for sunxdcc.

All exceptions inherit from SunXDCCError (single catch point).
"""

from __future__ import annotations

from typing import Optional


class SunXDCCError(Exception):
    """Base exception for all sunxdcc errors."""


class TransportError(SunXDCCError):
    """The request to the search service failed; no results were retrieved."""


class MalformedLineError(SunXDCCError):
    """A response line did not split into the expected number of fields.

    Instances are yielded alongside records by the parser so that one bad
    line does not stop the rest of the response from being read.
    """

    def __init__(self, line: str, lineno: Optional[int] = None, field_count: Optional[int] = None):
        if field_count is None:
            field_count = line.count("|") + 1
        self.line = line
        self.lineno = lineno
        self.field_count = field_count
        where = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}malformed result ({field_count} fields): {line!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MalformedLineError):
            return NotImplemented
        return (self.line, self.lineno, self.field_count) == (other.line, other.lineno, other.field_count)

    def __hash__(self) -> int:
        return hash((self.line, self.lineno, self.field_count))
