"""SHA-3 checksum generation and manifest verification.

The package is organised leaves first: `digest` wraps the hash primitive,
`manifest` owns the two line grammars, and `verify` / `generate` drive them.
"""

__version__ = "1.0"

PROG = "sha3sum"

__all__: list[str] = [
    "cli",
    "config",
    "digest",
    "errors",
    "generate",
    "manifest",
    "report",
    "verify",
]
