from __future__ import annotations

import hmac

import pytest

from sha3sum.digest import compare
from sha3sum.digest.compare import constant_time_equal, decode_hex, digests_match
from sha3sum.errors import DecodeError

from tests.fixtures import sha3_hex, tamper


def test_decode_hex_accepts_both_cases() -> None:
    assert decode_hex("DEADbeef") == b"\xde\xad\xbe\xef"


@pytest.mark.parametrize("value", ["abc", "zz", "12 34", "é1"])
def test_decode_hex_rejects_malformed(value: str) -> None:
    with pytest.raises(DecodeError):
        decode_hex(value)


def test_digests_match_is_case_insensitive() -> None:
    digest = sha3_hex(b"x")
    assert digests_match(digest.upper(), digest)


def test_every_mismatch_position_is_detected_via_compare_digest(monkeypatch) -> None:
    calls: list[tuple[bytes, bytes]] = []
    real_compare = hmac.compare_digest

    def spy(a: bytes, b: bytes) -> bool:
        calls.append((a, b))
        return real_compare(a, b)

    monkeypatch.setattr(compare.hmac, "compare_digest", spy)

    digest = sha3_hex(b"payload", 512)
    for position in range(len(digest)):
        assert not digests_match(tamper(digest, position), digest)
    assert digests_match(digest, digest)

    # Every comparison, wherever the first difference sits, goes through compare_digest.
    assert len(calls) == len(digest) + 1
    assert all(len(a) == len(b) == 64 for a, b in calls)


def test_constant_time_equal() -> None:
    assert constant_time_equal(b"\x00" * 32, b"\x00" * 32)
    assert not constant_time_equal(b"\x00" * 32, b"\x00" * 31 + b"\x01")
    assert not constant_time_equal(b"\x00" * 32, b"\x00" * 28)
