"""Digest primitives: widths, transfer modes, streaming computation and comparison."""

from sha3sum.digest.compare import constant_time_equal, decode_hex, digests_match
from sha3sum.digest.compute import BUF_SIZE, compute_digest, effective_mode
from sha3sum.digest.widths import AlgorithmWidth, TransferMode

__all__: list[str] = [
    "AlgorithmWidth",
    "BUF_SIZE",
    "TransferMode",
    "compute_digest",
    "constant_time_equal",
    "decode_hex",
    "digests_match",
    "effective_mode",
]
