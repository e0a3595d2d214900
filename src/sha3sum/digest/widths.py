from __future__ import annotations

from enum import Enum, IntEnum


class AlgorithmWidth(IntEnum):
    SHA3_224 = 224
    SHA3_256 = 256
    SHA3_384 = 384
    SHA3_512 = 512

    @property
    def hex_length(self) -> int:
        return self.value // 4

    @property
    def label(self) -> str:
        return f"SHA3-{self.value}"

    @classmethod
    def from_bits(cls, bits: int) -> AlgorithmWidth:
        """Return the width for `bits`; raises ValueError for unsupported values."""

        return cls(int(bits))

    @classmethod
    def from_hex_length(cls, length: int) -> AlgorithmWidth:
        for width in cls:
            if width.hex_length == length:
                return width
        raise ValueError(f"no SHA3 width produces {length} hex characters")


class TransferMode(Enum):
    BINARY = "binary"
    TEXT = "text"
    PORTABLE = "portable"

    @classmethod
    def parse(cls, value: str) -> TransferMode:
        return cls(value.strip().lower())
