from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, TextIO

from sha3sum import PROG, __version__
from sha3sum.config import load_config_from_env, resolve_transfer_mode, resolve_width
from sha3sum.console import write_line
from sha3sum.digest.widths import AlgorithmWidth
from sha3sum.errors import ConfigError, Sha3sumError
from sha3sum.generate import generate
from sha3sum.manifest.entry import ManifestFormat
from sha3sum.report import build_report, write_report
from sha3sum.verify import DigestResult, check_manifest


def _setup_logging(verbose: bool, stream: TextIO) -> logging.Logger:
    """Route package log records to stderr."""

    logger = logging.getLogger(PROG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Print or check SHA3 checksums. With no FILE, or when FILE is -, "
            "read standard input."
        ),
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to hash")
    parser.add_argument(
        "-a",
        "--algorithm",
        type=int,
        default=int(AlgorithmWidth.SHA3_256),
        help="224, 256 (default), 384, 512",
    )
    parser.add_argument(
        "-c", "--check", metavar="MANIFEST", help="Check SHA3 sums against the given list"
    )
    parser.add_argument(
        "-t", "--tag", action="store_true", help="Create (or read) BSD-style tagged checksums"
    )
    parser.add_argument("-b", "--binary", action="store_true", help="Read in binary mode")
    parser.add_argument(
        "--text", action="store_true", help="Read in text mode (CRLF line endings become LF)"
    )
    parser.add_argument(
        "-p", "--portable", action="store_true", help="Read in portable (raw) mode"
    )

    check = parser.add_argument_group("check options")
    check.add_argument(
        "-s",
        "--status",
        "-w",
        "--warn",
        dest="status",
        action="store_true",
        help="Don't output anything, status code shows success",
    )
    check.add_argument(
        "-q", "--quiet", action="store_true", help="Don't print OK for each verified file"
    )
    check.add_argument(
        "--strict", action="store_true", help="Exit non-zero for any invalid input"
    )
    check.add_argument(
        "-j", "--jobs", type=int, default=None, help="Hash files on N worker threads"
    )
    check.add_argument("--report", metavar="PATH", help="Write a JSON verification report")

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging (includes improperly formatted manifest lines)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Output version information and exit"
    )
    return parser


def _check_only_flags(args: argparse.Namespace) -> list[str]:
    used: list[str] = []
    if args.status:
        used.append("--status")
    if args.quiet:
        used.append("--quiet")
    if args.strict:
        used.append("--strict")
    if args.jobs is not None:
        used.append("--jobs")
    if args.report:
        used.append("--report")
    return used


def _run(args: argparse.Namespace, *, out: TextIO, err: TextIO, stdin: BinaryIO | None) -> int:
    width = resolve_width(args.algorithm)
    override = resolve_transfer_mode(binary=args.binary, text=args.text, portable=args.portable)
    config = load_config_from_env()

    if args.check is None:
        used = _check_only_flags(args)
        if used:
            raise ConfigError(f"{', '.join(used)} can only be used with --check")
        ok = generate(
            args.files,
            width,
            mode=override,
            tagged=args.tag,
            default_mode=config.default_mode,
            chunk_size=config.chunk_size,
            out=out,
            err=err,
            stdin=stdin,
        )
        return 0 if ok else 1

    if args.files:
        raise ConfigError("FILE operands cannot be combined with --check")
    jobs = config.jobs if args.jobs is None else args.jobs
    if jobs <= 0:
        raise ConfigError("--jobs must be > 0")

    fmt = ManifestFormat.from_flag(args.tag)
    results: list[DigestResult] = []
    summary = check_manifest(
        args.check,
        fmt,
        strict=args.strict,
        stdin=stdin,
        override_mode=override,
        status_only=args.status,
        quiet=args.quiet,
        default_mode=config.default_mode,
        chunk_size=config.chunk_size,
        jobs=jobs,
        out=out,
        err=err,
        on_result=results.append,
    )

    if args.report:
        report = build_report(
            manifest=args.check,
            manifest_format=fmt.value,
            results=results,
            summary=summary,
        )
        write_report(args.report, report)

    return summary.exit_status


def main(
    argv: list[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr

    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, err)

    if args.version:
        print(f"{PROG} {__version__}", file=out)
        return 0

    try:
        return _run(args, out=out, err=err, stdin=stdin)
    except Sha3sumError as exc:
        write_line(err, f"{PROG}: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
