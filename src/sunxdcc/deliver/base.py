from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Union

from ..errors import MalformedLineError

FIELD_COUNT = 6


@dataclass(frozen=True)
class SearchResult:
    """One pack offered by an XDCC bot, as listed by SunXDCC.

    All attributes are the raw text of the response fields; ``bots`` and
    ``filesize`` are left for the caller to interpret.
    """

    network: str
    bots: str
    filename: str
    filesize: str
    bot: str
    trigger: str

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "SearchResult":
        if len(fields) != FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
        network, bots, filename, filesize, bot, trigger = fields
        return cls(
            network=network,
            bots=bots,
            filename=filename,
            filesize=filesize,
            bot=bot,
            trigger=trigger,
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# A parsed response line: either a record or the error describing why it
# could not be read. Errors are yielded, not raised.
SearchOutcome = Union[SearchResult, MalformedLineError]
