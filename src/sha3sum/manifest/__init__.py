"""Manifest line grammars, reading and writing."""

from sha3sum.manifest.entry import ManifestEntry, ManifestFormat
from sha3sum.manifest.grammar import parse_line, parse_plain_line, parse_tagged_line
from sha3sum.manifest.reader import iter_manifest, open_manifest, read_manifest
from sha3sum.manifest.tree import iter_tree_files, write_tree_manifest
from sha3sum.manifest.writer import format_entry, format_manifest_entry

__all__: list[str] = [
    "ManifestEntry",
    "ManifestFormat",
    "format_entry",
    "format_manifest_entry",
    "iter_manifest",
    "iter_tree_files",
    "open_manifest",
    "parse_line",
    "parse_plain_line",
    "parse_tagged_line",
    "read_manifest",
    "write_tree_manifest",
]
