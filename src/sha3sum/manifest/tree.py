from __future__ import annotations

import logging
from pathlib import Path

from sha3sum.digest.compute import BUF_SIZE, compute_digest
from sha3sum.digest.widths import AlgorithmWidth, TransferMode
from sha3sum.manifest.writer import format_entry

logger = logging.getLogger(__name__)


def iter_tree_files(root: str | Path, exclude: set[str] | None = None) -> list[str]:
    """Relative POSIX paths of every regular file below `root`, sorted."""

    root_path = Path(root)
    exclude_set = set() if exclude is None else set(exclude)

    rel_paths: list[str] = []
    for child in root_path.rglob("*"):
        if not child.is_file():
            continue
        rel_name = child.relative_to(root_path).as_posix()
        if rel_name in exclude_set or child.name in exclude_set:
            continue
        rel_paths.append(rel_name)

    rel_paths.sort()
    return rel_paths


def write_tree_manifest(
    root: str | Path,
    out: str | Path,
    width: AlgorithmWidth = AlgorithmWidth.SHA3_256,
    *,
    tagged: bool = False,
    exclude: set[str] | None = None,
    chunk_size: int = BUF_SIZE,
) -> Path:
    """Write a deterministic manifest (sorted paths, LF newlines) for `root`.

    Paths in the manifest are relative to `root`; the manifest file itself is
    skipped when it lives inside the tree.
    """

    root_path = Path(root).resolve()
    out_path = Path(out).resolve()
    exclude_set = set() if exclude is None else set(exclude)
    try:
        exclude_set.add(out_path.relative_to(root_path).as_posix())
    except ValueError:
        pass

    lines: list[str] = []
    for rel in iter_tree_files(root_path, exclude_set):
        digest = compute_digest(
            str(root_path / rel), width, TransferMode.BINARY, chunk_size=chunk_size
        )
        lines.append(format_entry(digest, rel, width, TransferMode.TEXT, tagged) + "\n")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="\n") as f:
        f.writelines(lines)

    logger.info("wrote %d entries to %s", len(lines), out_path)
    return out_path
