from __future__ import annotations

import binascii
import hmac

from sha3sum.errors import DecodeError


def decode_hex(value: str) -> bytes:
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"invalid hex digest {value!r}: {exc}") from exc


def constant_time_equal(left: bytes, right: bytes) -> bool:
    # hmac.compare_digest does not exit early on the first differing byte.
    return hmac.compare_digest(left, right)


def digests_match(expected_hex: str, actual_hex: str) -> bool:
    """Decode both digests and compare them in constant time.

    Raises DecodeError when either side is not valid hex.
    """

    expected = decode_hex(expected_hex)
    actual = decode_hex(actual_hex)
    return constant_time_equal(expected, actual)
