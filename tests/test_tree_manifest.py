from __future__ import annotations

import io

from sha3sum.digest.widths import AlgorithmWidth
from sha3sum.manifest.entry import ManifestFormat
from sha3sum.manifest.tree import iter_tree_files, write_tree_manifest
from sha3sum.verify import check_manifest

from tests.fixtures import sha3_hex, write_file


def _make_tree(root) -> None:
    write_file(root, "b.txt", b"b")
    write_file(root, "a/z.txt", b"z")
    write_file(root, "a/c.txt", b"c")


def test_iter_tree_files_is_sorted_posix(tmp_path) -> None:
    _make_tree(tmp_path)
    assert iter_tree_files(tmp_path) == ["a/c.txt", "a/z.txt", "b.txt"]
    assert iter_tree_files(tmp_path, exclude={"b.txt"}) == ["a/c.txt", "a/z.txt"]


def test_write_tree_manifest_is_deterministic_and_skips_itself(tmp_path) -> None:
    _make_tree(tmp_path)
    out = tmp_path / "SHA3SUMS"

    write_tree_manifest(tmp_path, out)
    first = out.read_bytes()
    write_tree_manifest(tmp_path, out)
    assert out.read_bytes() == first

    assert first.decode("utf-8").splitlines() == [
        f"{sha3_hex(b'c')}  a/c.txt",
        f"{sha3_hex(b'z')}  a/z.txt",
        f"{sha3_hex(b'b')}  b.txt",
    ]
    assert b"\r\n" not in first


def test_tree_manifest_verifies_from_root(tmp_path, monkeypatch) -> None:
    _make_tree(tmp_path)
    out = tmp_path / "SHA3SUMS"
    write_tree_manifest(tmp_path, out, AlgorithmWidth.SHA3_384, tagged=True)

    monkeypatch.chdir(tmp_path)
    stdout = io.StringIO()
    summary = check_manifest(out, ManifestFormat.TAGGED, strict=True, out=stdout, err=io.StringIO())

    assert summary.good_count == 3
    assert summary.exit_status == 0
    assert stdout.getvalue().splitlines() == ["a/c.txt: OK", "a/z.txt: OK", "b.txt: OK"]


def test_write_manifest_tool(tmp_path) -> None:
    from tools.write_manifest import main

    root = tmp_path / "tree"
    _make_tree(root)
    out = tmp_path / "manifests" / "tree.sha3"

    assert main(["--root", str(root), "--out", str(out), "-a", "512", "--tag"]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == f"SHA3-512 (a/c.txt) = {sha3_hex(b'c', 512)}"

    assert main(["--root", str(root), "--out", str(out), "-a", "100"]) == 1
