from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sha3sum.verify import DigestResult, VerificationSummary

REPORT_SCHEMA_VERSION = "1.0.0"


def build_report(
    *,
    manifest: str,
    manifest_format: str,
    results: list[DigestResult],
    summary: VerificationSummary,
) -> dict[str, Any]:
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "manifest": manifest,
        "manifest_format": manifest_format,
        "entries": [
            {
                "filename": r.filename,
                "status": r.status.value,
                "expected_sha3": r.expected_hex,
                "actual_sha3": r.digest_hex,
                "error": r.error,
            }
            for r in results
        ],
        "summary": {
            "good": summary.good_count,
            "bad": summary.bad_count,
            "total": summary.total,
            "saw_error": summary.saw_error,
            "ok": summary.ok,
        },
    }


def write_report(
    path: str | Path,
    data: dict[str, Any],
    *,
    make_parents: bool = True,
) -> Path:
    """Write the report deterministically (UTF-8, LF newlines, trailing newline).

    Entries keep manifest order; only object keys are sorted.
    """

    p = Path(path)
    if make_parents:
        p.parent.mkdir(parents=True, exist_ok=True)

    p.write_text(
        json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
        errors="surrogateescape",
        newline="\n",
    )
    return p
