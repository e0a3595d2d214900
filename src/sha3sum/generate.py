from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import BinaryIO, TextIO

from sha3sum import PROG
from sha3sum.console import write_line
from sha3sum.digest.compute import BUF_SIZE, STDIN_NAME, compute_digest, effective_mode
from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.errors import DigestIOError, FormatError
from sha3sum.manifest.writer import format_entry

logger = logging.getLogger(__name__)


def generate(
    files: Sequence[str],
    width: AlgorithmWidth,
    *,
    mode: TransferMode | None = None,
    tagged: bool = False,
    default_mode: TransferMode = TransferMode.BINARY,
    chunk_size: int = BUF_SIZE,
    out: TextIO | None = None,
    err: TextIO | None = None,
    stdin: BinaryIO | None = None,
) -> bool:
    """Write one manifest line per file; returns False if any file failed.

    The mode char written to a plain line reflects only the explicitly
    requested `mode`; hashing uses that mode or `default_mode`.
    """

    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    hash_mode = effective_mode(None, mode, default_mode)
    recorded_mode = TransferMode.TEXT if mode is None else mode

    ok = True
    for filename in files or [STDIN_NAME]:
        try:
            digest = compute_digest(filename, width, hash_mode, chunk_size=chunk_size, stdin=stdin)
            line = format_entry(digest, filename, width, recorded_mode, tagged)
        except (DigestIOError, FormatError) as exc:
            write_line(err, f"{PROG}: {exc}")
            ok = False
            continue
        write_line(out, line)

    return ok
