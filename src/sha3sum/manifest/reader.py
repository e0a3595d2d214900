from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from sha3sum.errors import DigestIOError, ParseError
from sha3sum.manifest.entry import ManifestEntry, ManifestFormat
from sha3sum.manifest.grammar import parse_line

logger = logging.getLogger(__name__)


def _decode_line(raw: bytes) -> str:
    if raw.endswith(b"\r\n"):
        raw = raw[:-2]
    elif raw.endswith(b"\n"):
        raw = raw[:-1]
    # surrogateescape keeps undecodable filename bytes intact for open().
    return raw.decode("utf-8", errors="surrogateescape")


def iter_manifest(
    source: BinaryIO,
    fmt: ManifestFormat,
    *,
    strict: bool = False,
    warn: bool = False,
) -> Iterator[ManifestEntry]:
    """Yield one entry per physical line of `source`.

    With `strict`, the first bad line raises ParseError. Otherwise a bad line
    yields a placeholder entry so the entry count matches the line count.
    """

    for line_number, raw in enumerate(source, start=1):
        line = _decode_line(raw)
        try:
            entry = parse_line(line, fmt)
        except ParseError as exc:
            error = exc.at_line(line_number)
            if strict:
                raise error from None
            logger.log(logging.WARNING if warn else logging.DEBUG, "%s", error)
            yield ManifestEntry.placeholder(error)
            continue
        yield ManifestEntry(
            digest_hex=entry.digest_hex,
            filename=entry.filename,
            width=entry.width,
            mode=entry.mode,
            line_number=line_number,
        )


def read_manifest(
    source: BinaryIO,
    fmt: ManifestFormat,
    *,
    strict: bool = False,
    warn: bool = False,
) -> list[ManifestEntry]:
    """Read every entry before any verification starts."""

    entries = list(iter_manifest(source, fmt, strict=strict, warn=warn))
    logger.debug("read %d manifest entries (%s)", len(entries), fmt.value)
    return entries


@contextmanager
def open_manifest(path: str | Path, stdin: BinaryIO | None = None) -> Iterator[BinaryIO]:
    """Open a manifest for binary reading; "-" is standard input and is left open."""

    if str(path) == "-":
        yield stdin if stdin is not None else sys.stdin.buffer
        return
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise DigestIOError(str(path), exc) from exc
    with f:
        yield f
