from __future__ import annotations

import dataclasses
import logging
import sys
from collections.abc import Callable, Generator, Sequence
from contextlib import closing
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import BinaryIO, TextIO

from sha3sum import PROG
from sha3sum.console import write_line
from sha3sum.digest.compare import digests_match
from sha3sum.digest.compute import BUF_SIZE, compute_digest, effective_mode
from sha3sum.digest.widths import TransferMode
from sha3sum.errors import DecodeError, DigestIOError
from sha3sum.manifest.entry import ManifestEntry, ManifestFormat
from sha3sum.manifest.reader import open_manifest, read_manifest

logger = logging.getLogger(__name__)


class CheckStatus(str, Enum):
    OK = "OK"
    FAILED = "FAILED"
    ERROR = "ERROR"


@dataclass(frozen=True, slots=True)
class DigestResult:
    filename: str
    digest_hex: str
    ok: bool
    status: CheckStatus = CheckStatus.OK
    expected_hex: str = ""
    error: str | None = None


@dataclass(frozen=True, slots=True)
class VerificationSummary:
    good_count: int = 0
    bad_count: int = 0
    saw_error: bool = False

    @property
    def total(self) -> int:
        return self.good_count + self.bad_count

    @property
    def ok(self) -> bool:
        return self.bad_count == 0 and not self.saw_error

    @property
    def exit_status(self) -> int:
        return 0 if self.ok else 1

    def add(self, result: DigestResult) -> VerificationSummary:
        if result.ok:
            return dataclasses.replace(self, good_count=self.good_count + 1)
        return dataclasses.replace(
            self,
            bad_count=self.bad_count + 1,
            saw_error=self.saw_error or result.status is CheckStatus.ERROR,
        )


def _iter_digest_jobs(
    entries: Sequence[ManifestEntry],
    compute: Callable[[ManifestEntry], str],
    jobs: int,
) -> Generator[tuple[ManifestEntry, Callable[[], str]], None, None]:
    """Pair each entry with a callable that returns its computed digest.

    With `jobs > 1` the digests are computed on a thread pool, but results are
    still handed out in manifest order.
    """

    if jobs <= 1:
        for entry in entries:
            yield entry, partial(compute, entry)
        return

    executor = ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="sha3sum")
    try:
        futures = [
            None if entry.is_placeholder else executor.submit(compute, entry)
            for entry in entries
        ]
        for entry, future in zip(entries, futures):
            if future is None:
                yield entry, partial(compute, entry)
            else:
                yield entry, future.result
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


def _check_entry(
    entry: ManifestEntry,
    digest_job: Callable[[], str],
    *,
    strict: bool,
    status_only: bool,
    err: TextIO,
) -> DigestResult:
    if entry.parse_error is not None:
        if strict:
            raise entry.parse_error
        return DigestResult(
            filename=entry.filename,
            digest_hex="",
            ok=False,
            status=CheckStatus.ERROR,
            error=str(entry.parse_error),
        )

    try:
        actual_hex = digest_job()
        matched = digests_match(entry.digest_hex, actual_hex)
    except (DigestIOError, DecodeError) as exc:
        if strict:
            raise
        if not status_only:
            write_line(err, f"{PROG}: {exc}")
        return DigestResult(
            filename=entry.filename,
            digest_hex="",
            ok=False,
            status=CheckStatus.ERROR,
            expected_hex=entry.digest_hex,
            error=str(exc),
        )

    return DigestResult(
        filename=entry.filename,
        digest_hex=actual_hex,
        ok=matched,
        status=CheckStatus.OK if matched else CheckStatus.FAILED,
        expected_hex=entry.digest_hex,
    )


def verify(
    entries: Sequence[ManifestEntry],
    *,
    override_mode: TransferMode | None = None,
    strict: bool = False,
    status_only: bool = False,
    quiet: bool = False,
    default_mode: TransferMode = TransferMode.BINARY,
    chunk_size: int = BUF_SIZE,
    jobs: int = 1,
    out: TextIO | None = None,
    err: TextIO | None = None,
    stdin: BinaryIO | None = None,
    on_result: Callable[[DigestResult], None] | None = None,
) -> VerificationSummary:
    """Recompute and compare every entry in manifest order.

    Per-entry I/O and decode failures abort the batch under `strict` and are
    otherwise counted as bad. A digest mismatch is a FAILED result, not an
    error.
    """

    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    def compute(entry: ManifestEntry) -> str:
        if entry.width is None:
            raise ValueError(f"placeholder entry from line {entry.line_number} has no width")
        mode = effective_mode(entry.mode, override_mode, default_mode)
        return compute_digest(entry.filename, entry.width, mode, chunk_size=chunk_size, stdin=stdin)

    summary = VerificationSummary()
    with closing(_iter_digest_jobs(entries, compute, jobs)) as digest_jobs:
        for entry, digest_job in digest_jobs:
            result = _check_entry(
                entry, digest_job, strict=strict, status_only=status_only, err=err
            )
            if not status_only and not (result.ok and quiet):
                write_line(out, f"{result.filename}: {'OK' if result.ok else 'FAILED'}")
            if on_result is not None:
                on_result(result)
            summary = summary.add(result)

    if summary.bad_count > 0 and not status_only:
        write_line(
            err,
            f"{PROG}: WARNING {summary.bad_count} of {summary.total} computed checksums did NOT match",
        )

    logger.debug(
        "verified %d entries: good=%d bad=%d", summary.total, summary.good_count, summary.bad_count
    )
    return summary


def check_manifest(
    manifest: str | Path,
    fmt: ManifestFormat,
    *,
    strict: bool = False,
    warn: bool = False,
    stdin: BinaryIO | None = None,
    **verify_kwargs,
) -> VerificationSummary:
    """Read the whole manifest, then verify it."""

    with open_manifest(manifest, stdin=stdin) as source:
        entries = read_manifest(source, fmt, strict=strict, warn=warn)
    return verify(entries, strict=strict, stdin=stdin, **verify_kwargs)
