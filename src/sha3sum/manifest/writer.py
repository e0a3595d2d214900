from __future__ import annotations

from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import FormatError
from sha3sum.manifest.entry import ManifestEntry
from sha3sum.manifest.grammar import is_hex

MODE_CHAR: dict[TransferMode, str] = {
    TransferMode.BINARY: "*",
    TransferMode.PORTABLE: "?",
    TransferMode.TEXT: "",
}


def _check_representable(filename: str, mode: TransferMode, tagged: bool) -> None:
    if not filename:
        raise FormatError("empty filename")
    if "\n" in filename or "\r" in filename:
        raise FormatError(f"filename contains a line break: {filename!r}")
    if tagged:
        if ")" in filename:
            raise FormatError(f"tagged format cannot hold ')' in a filename: {filename!r}")
        return
    if filename.startswith(" "):
        raise FormatError(f"plain format cannot hold a leading space: {filename!r}")
    if mode is TransferMode.TEXT and filename[0] in "*?":
        raise FormatError(f"plain format would read {filename[0]!r} as a mode flag: {filename!r}")


def format_entry(
    digest_hex: str,
    filename: str,
    width: AlgorithmWidth,
    mode: TransferMode = TransferMode.TEXT,
    tagged: bool = False,
) -> str:
    """Render one manifest line (without the newline).

    Raises FormatError when parsing the line back would not give the same
    filename and digest.
    """

    width = AlgorithmWidth(width)
    if not is_hex(digest_hex):
        raise FormatError(f"digest is not hex: {digest_hex!r}")
    if len(digest_hex) != width.hex_length:
        raise FormatError(
            f"{width.label} digest must be {width.hex_length} hex characters, got {len(digest_hex)}"
        )
    _check_representable(filename, mode, tagged)

    if tagged:
        return f"{width.label} ({filename}) = {digest_hex}"
    return f"{digest_hex}  {MODE_CHAR[mode]}{filename}"


def format_manifest_entry(entry: ManifestEntry, tagged: bool = False) -> str:
    if entry.width is None:
        raise FormatError(f"cannot write placeholder entry from line {entry.line_number}")
    return format_entry(entry.digest_hex, entry.filename, entry.width, entry.mode, tagged)
