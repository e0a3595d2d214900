from __future__ import annotations

from enum import Enum


class Sha3sumError(Exception):
    """Base class for every failure raised by the sha3sum core."""


class ParseErrorKind(str, Enum):
    MALFORMED_LINE = "malformed line"
    INVALID_WIDTH = "invalid width"
    DIGEST_LENGTH_MISMATCH = "digest length mismatch"
    EMPTY_FILENAME = "empty filename"


class ParseError(Sha3sumError):
    """A manifest line that does not satisfy its grammar."""

    def __init__(self, kind: ParseErrorKind, line: str, line_number: int | None = None) -> None:
        self.kind = kind
        self.line = line
        self.line_number = line_number
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{where}improperly formatted SHA3 checksum line ({self.kind.value}): {self.line!r}"

    def at_line(self, line_number: int) -> ParseError:
        return ParseError(self.kind, self.line, line_number)


class DigestIOError(Sha3sumError):
    """Opening or reading a file to be hashed failed."""

    def __init__(self, filename: str, cause: OSError | ValueError) -> None:
        self.filename = filename
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{filename}: {reason}")


class DecodeError(Sha3sumError):
    """A digest string is not valid hex."""


class ConfigError(Sha3sumError):
    """Invalid algorithm width, conflicting flags or a bad environment value."""


class FormatError(Sha3sumError):
    """A filename or digest cannot be written in the requested grammar."""
