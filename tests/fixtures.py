from __future__ import annotations

import hashlib
from pathlib import Path

# Published SHA3-256 test vector for the three-byte message "abc".
SHA3_256_ABC = "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"

SHA3_CONSTRUCTORS = {
    224: hashlib.sha3_224,
    256: hashlib.sha3_256,
    384: hashlib.sha3_384,
    512: hashlib.sha3_512,
}


def sha3_hex(data: bytes, bits: int = 256) -> str:
    return SHA3_CONSTRUCTORS[bits](data).hexdigest()


def write_file(directory: Path, name: str, data: bytes) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def tamper(digest_hex: str, position: int) -> str:
    """Flip one hex character so the digest no longer matches."""

    original = digest_hex[position]
    replacement = "0" if original != "0" else "1"
    return digest_hex[:position] + replacement + digest_hex[position + 1 :]
