from __future__ import annotations

from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import ParseError, ParseErrorKind
from sha3sum.manifest.entry import ManifestEntry, ManifestFormat

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

TAG_PREFIX = "SHA3-"

MODE_CHARS: dict[str, TransferMode] = {
    "*": TransferMode.BINARY,
    "?": TransferMode.PORTABLE,
}


def is_hex(value: str) -> bool:
    return bool(value) and all(ch in HEX_DIGITS for ch in value)


def parse_tagged_line(line: str) -> ManifestEntry:
    """Parse `SHA3-<width> (<filename>) = <hex>`."""

    def fail(kind: ParseErrorKind) -> ParseError:
        return ParseError(kind, line)

    if not line.startswith(TAG_PREFIX):
        raise fail(ParseErrorKind.MALFORMED_LINE)
    rest = line[len(TAG_PREFIX) :]

    width_text, sep, rest = rest.partition(" (")
    if not sep or not width_text.isascii() or not width_text.isdigit():
        raise fail(ParseErrorKind.MALFORMED_LINE)

    filename, sep, rest = rest.partition(")")
    if not sep:
        raise fail(ParseErrorKind.MALFORMED_LINE)

    rest = rest.lstrip(" ")
    if not rest.startswith("="):
        raise fail(ParseErrorKind.MALFORMED_LINE)
    digest_hex = rest[1:].lstrip(" ")
    if not is_hex(digest_hex):
        raise fail(ParseErrorKind.MALFORMED_LINE)

    try:
        width = AlgorithmWidth.from_bits(int(width_text))
    except ValueError:
        raise fail(ParseErrorKind.INVALID_WIDTH) from None
    if not filename:
        raise fail(ParseErrorKind.EMPTY_FILENAME)
    if len(digest_hex) != width.hex_length:
        raise fail(ParseErrorKind.DIGEST_LENGTH_MISMATCH)

    return ManifestEntry(digest_hex=digest_hex, filename=filename, width=width)


def parse_plain_line(line: str) -> ManifestEntry:
    """Parse `<hex>  [*|?]<filename>`; the width comes from the digest length."""

    def fail(kind: ParseErrorKind) -> ParseError:
        return ParseError(kind, line)

    digest_hex, sep, rest = line.partition(" ")
    if not sep or not is_hex(digest_hex):
        raise fail(ParseErrorKind.MALFORMED_LINE)

    # Two or more spaces; one space only in front of a mode char (coreutils `hex *file`).
    if rest.startswith(" "):
        rest = rest.lstrip(" ")
    elif rest[:1] not in MODE_CHARS:
        raise fail(ParseErrorKind.MALFORMED_LINE)

    try:
        width = AlgorithmWidth.from_hex_length(len(digest_hex))
    except ValueError:
        raise fail(ParseErrorKind.DIGEST_LENGTH_MISMATCH) from None

    mode = MODE_CHARS.get(rest[:1], TransferMode.TEXT)
    filename = rest[1:] if mode is not TransferMode.TEXT else rest
    if not filename:
        raise fail(ParseErrorKind.EMPTY_FILENAME)

    return ManifestEntry(digest_hex=digest_hex, filename=filename, width=width, mode=mode)


def parse_line(line: str, fmt: ManifestFormat) -> ManifestEntry:
    if fmt is ManifestFormat.TAGGED:
        return parse_tagged_line(line)
    return parse_plain_line(line)
