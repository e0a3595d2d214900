from __future__ import annotations

import hashlib
from typing import Callable, Protocol

from sha3sum.digest.widths import AlgorithmWidth


class DigestAccumulator(Protocol):
    def update(self, data: bytes, /) -> None: ...

    def hexdigest(self) -> str: ...


AccumulatorFactory = Callable[[AlgorithmWidth], DigestAccumulator]

_CONSTRUCTORS: dict[AlgorithmWidth, Callable[[], DigestAccumulator]] = {
    AlgorithmWidth.SHA3_224: hashlib.sha3_224,
    AlgorithmWidth.SHA3_256: hashlib.sha3_256,
    AlgorithmWidth.SHA3_384: hashlib.sha3_384,
    AlgorithmWidth.SHA3_512: hashlib.sha3_512,
}


def new_accumulator(width: AlgorithmWidth) -> DigestAccumulator:
    """One fresh SHA3 accumulator per file."""

    return _CONSTRUCTORS[AlgorithmWidth(width)]()
