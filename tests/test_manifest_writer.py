from __future__ import annotations

import pytest

from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import FormatError
from sha3sum.manifest.entry import ManifestEntry, ManifestFormat
from sha3sum.manifest.grammar import parse_line
from sha3sum.manifest.writer import format_entry, format_manifest_entry

from tests.fixtures import sha3_hex

FILENAMES = ["file.txt", "dir/sub dir/name with spaces.bin", "ünïcode-ñame", "a", "x*y?z"]


def test_tagged_format() -> None:
    digest = sha3_hex(b"x", 224)
    line = format_entry(digest, "file.txt", AlgorithmWidth.SHA3_224, tagged=True)
    assert line == f"SHA3-224 (file.txt) = {digest}"


@pytest.mark.parametrize(
    ("mode", "prefix"),
    [(TransferMode.TEXT, ""), (TransferMode.BINARY, "*"), (TransferMode.PORTABLE, "?")],
)
def test_plain_format_mode_chars(mode: TransferMode, prefix: str) -> None:
    digest = sha3_hex(b"x")
    line = format_entry(digest, "file.txt", AlgorithmWidth.SHA3_256, mode)
    assert line == f"{digest}  {prefix}file.txt"


@pytest.mark.parametrize("width", list(AlgorithmWidth))
@pytest.mark.parametrize("mode", list(TransferMode))
@pytest.mark.parametrize("filename", FILENAMES)
def test_plain_round_trip(width: AlgorithmWidth, mode: TransferMode, filename: str) -> None:
    entry = ManifestEntry(
        digest_hex=sha3_hex(filename.encode(), width.value),
        filename=filename,
        width=width,
        mode=mode,
    )
    line = format_manifest_entry(entry)
    assert parse_line(line, ManifestFormat.PLAIN) == entry


@pytest.mark.parametrize("width", list(AlgorithmWidth))
@pytest.mark.parametrize("filename", FILENAMES)
def test_tagged_round_trip(width: AlgorithmWidth, filename: str) -> None:
    entry = ManifestEntry(
        digest_hex=sha3_hex(filename.encode(), width.value),
        filename=filename,
        width=width,
    )
    line = format_manifest_entry(entry, tagged=True)
    assert parse_line(line, ManifestFormat.TAGGED) == entry


@pytest.mark.parametrize(
    ("filename", "mode", "tagged"),
    [
        ("a)b", TransferMode.TEXT, True),
        ("line\nbreak", TransferMode.TEXT, False),
        (" leading", TransferMode.TEXT, False),
        ("*star", TransferMode.TEXT, False),
        ("?query", TransferMode.TEXT, False),
        ("", TransferMode.BINARY, False),
    ],
)
def test_unrepresentable_filenames_are_rejected(
    filename: str, mode: TransferMode, tagged: bool
) -> None:
    with pytest.raises(FormatError):
        format_entry(sha3_hex(b"x"), filename, AlgorithmWidth.SHA3_256, mode, tagged)


def test_flagged_mode_allows_leading_mode_char_in_filename() -> None:
    digest = sha3_hex(b"x")
    line = format_entry(digest, "*star", AlgorithmWidth.SHA3_256, TransferMode.BINARY)
    assert parse_line(line, ManifestFormat.PLAIN).filename == "*star"


def test_digest_length_must_match_width() -> None:
    with pytest.raises(FormatError):
        format_entry(sha3_hex(b"x", 224), "f", AlgorithmWidth.SHA3_256)


def test_placeholder_entries_cannot_be_written() -> None:
    from sha3sum.errors import ParseError, ParseErrorKind

    placeholder = ManifestEntry.placeholder(ParseError(ParseErrorKind.MALFORMED_LINE, "junk", 3))
    with pytest.raises(FormatError):
        format_manifest_entry(placeholder)
