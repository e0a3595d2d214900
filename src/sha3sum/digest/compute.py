from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from sha3sum.digest.accumulator import AccumulatorFactory, DigestAccumulator, new_accumulator
from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import DigestIOError

logger = logging.getLogger(__name__)

BUF_SIZE = 256 * 1024

STDIN_NAME = "-"


def effective_mode(
    entry_mode: TransferMode | None,
    override: TransferMode | None,
    default: TransferMode = TransferMode.BINARY,
) -> TransferMode:
    """Combine a per-entry mode with the global override.

    Binary and portable are flags: either side enables them. TEXT on an entry
    means no flag was recorded, so the override (or the configured default)
    decides.
    """

    flags = {entry_mode, override}
    if TransferMode.BINARY in flags:
        return TransferMode.BINARY
    if TransferMode.PORTABLE in flags:
        return TransferMode.PORTABLE
    if override is not None:
        return override
    return default


def _absorb_raw(stream: BinaryIO, acc: DigestAccumulator, chunk_size: int) -> None:
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        acc.update(chunk)


def _absorb_text(stream: BinaryIO, acc: DigestAccumulator, chunk_size: int) -> None:
    # A CR at the end of a chunk is held back until the next chunk shows
    # whether it starts a CRLF pair.
    held_cr = False
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        if held_cr:
            chunk = b"\r" + chunk
        held_cr = chunk.endswith(b"\r")
        if held_cr:
            chunk = chunk[:-1]
        acc.update(chunk.replace(b"\r\n", b"\n"))
    if held_cr:
        acc.update(b"\r")


def _absorb(stream: BinaryIO, acc: DigestAccumulator, mode: TransferMode, chunk_size: int) -> None:
    if mode is TransferMode.TEXT:
        _absorb_text(stream, acc, chunk_size)
    else:
        _absorb_raw(stream, acc, chunk_size)


def compute_digest(
    source: str,
    width: AlgorithmWidth,
    mode: TransferMode = TransferMode.BINARY,
    *,
    chunk_size: int = BUF_SIZE,
    stdin: BinaryIO | None = None,
    accumulator_factory: AccumulatorFactory = new_accumulator,
) -> str:
    """Stream `source` through a SHA3 accumulator and return lowercase hex.

    `source` is a filename, or "-" for standard input (never closed here).
    Open and read failures, including names open() rejects, surface as
    DigestIOError tagged with `source`.
    """

    acc = accumulator_factory(width)
    try:
        if source == STDIN_NAME:
            stream = stdin if stdin is not None else sys.stdin.buffer
            _absorb(stream, acc, mode, chunk_size)
        else:
            with open(source, "rb") as f:
                _absorb(f, acc, mode, chunk_size)
    except (OSError, ValueError) as exc:
        # ValueError: open() refuses names with an embedded NUL byte.
        raise DigestIOError(source, exc) from exc

    digest = acc.hexdigest().lower()
    logger.debug("%s %s (%s) = %s", AlgorithmWidth(width).label, source, mode.value, digest)
    return digest
