from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import ParseError


class ManifestFormat(str, Enum):
    TAGGED = "tagged"
    PLAIN = "plain"

    @classmethod
    def from_flag(cls, tagged: bool) -> ManifestFormat:
        return cls.TAGGED if tagged else cls.PLAIN


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    digest_hex: str
    filename: str
    width: AlgorithmWidth | None
    mode: TransferMode = TransferMode.TEXT
    line_number: int | None = None
    parse_error: ParseError | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.parse_error is not None

    @classmethod
    def placeholder(cls, error: ParseError) -> ManifestEntry:
        """Stand-in for a line that failed to parse outside strict mode."""

        return cls(
            digest_hex="",
            filename="",
            width=None,
            mode=TransferMode.TEXT,
            line_number=error.line_number,
            parse_error=error,
        )
