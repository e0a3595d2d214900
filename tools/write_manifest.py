#!/usr/bin/env python3
"""Write an audit-grade SHA3 manifest for a folder.

Format (plain):
    <sha3 hex>  <relative/path>

- Deterministic ordering (lexicographic by relative path)
- LF newlines
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sha3sum.config import resolve_width
from sha3sum.errors import Sha3sumError
from sha3sum.manifest.tree import write_tree_manifest


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Write SHA3 manifest for a folder")
    ap.add_argument("--root", type=Path, required=True)
    ap.add_argument("--out", type=Path, required=True)
    ap.add_argument("-a", "--algorithm", type=int, default=256)
    ap.add_argument("--tag", action="store_true", help="Write BSD-style tagged lines")
    args = ap.parse_args(argv)

    try:
        width = resolve_width(args.algorithm)
        write_tree_manifest(root=args.root, out=args.out, width=width, tagged=args.tag)
    except Sha3sumError as exc:
        print(f"write_manifest: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
