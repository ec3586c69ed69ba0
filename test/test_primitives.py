# tests/test_primitives.py
import hashlib

import pytest
from cryptography.hazmat.primitives import hashes

from fips_dsa.crypto.primitives import (
    default_random,
    hash_block,
    increment,
    is_probable_prime,
    miller_rabin_rounds,
    random_in_range,
)


def test_increment_zero_buffer():
    buf = bytearray(4)
    increment(buf)
    assert buf == bytearray(b"\x00\x00\x00\x01")


def test_increment_carries_left():
    buf = bytearray(b"\x01\xff\xff")
    increment(buf)
    assert buf == bytearray(b"\x02\x00\x00")


def test_increment_wraps_silently():
    buf = bytearray(b"\xff" * 20)
    increment(buf)
    assert buf == bytearray(20)


@pytest.mark.parametrize("k", [1, 2, 8, 20, 32])
def test_increment_is_add_one_mod_2_8k(k):
    for start in (0, 0x7F, (1 << (8 * k)) - 2):
        buf = bytearray(start.to_bytes(k, "big"))
        increment(buf)
        assert int.from_bytes(buf, "big") == (start + 1) % (1 << (8 * k))


def test_hash_block_matches_hashlib():
    data = bytearray(b"fips 186")
    assert hash_block(hashes.SHA1(), data) == hashlib.sha1(data).digest()
    assert hash_block(hashes.SHA256(), data) == hashlib.sha256(data).digest()
    assert len(hash_block(hashes.SHA384(), b"")) == 48


def test_is_probable_prime_known_values():
    assert is_probable_prime(2, 80)
    assert is_probable_prime((1 << 127) - 1, 80)
    assert is_probable_prime((1 << 61) - 1, 80)
    assert not is_probable_prime(1, 80)
    assert not is_probable_prime(0, 80)
    assert not is_probable_prime(561, 80)  # Carmichael number
    assert not is_probable_prime(((1 << 61) - 1) * ((1 << 31) - 1), 80)


def test_miller_rabin_rounds():
    assert miller_rabin_rounds(80) == 40
    assert miller_rabin_rounds(1) == 1
    assert miller_rabin_rounds(0) == 1


def test_random_in_range_bounds():
    for _ in range(200):
        v = random_in_range(2, 22)
        assert 2 <= v <= 22


def test_random_in_range_deterministic_rng():
    # deterministic rng for testing
    def rng(n): return b"\x01" * n
    # span 0x1ff needs 9 bits: 0x0101 >> 7 = 2
    assert random_in_range(10, 10 + 0x1ff, rng=rng) == 12
    assert random_in_range(5, 5, rng=rng) == 5


def test_random_in_range_rejects_out_of_span():
    values = iter([b"\xff", b"\x03"])

    def rng(n):
        return next(values)

    # span 4 needs 3 bits: 0xff >> 5 = 7 is rejected, 0x03 >> 5 = 0 is kept
    assert random_in_range(100, 104, rng=rng) == 100


def test_random_in_range_invalid():
    with pytest.raises(ValueError):
        random_in_range(5, 4)


def test_default_random_lengths():
    assert len(default_random(20)) == 20
    assert default_random(32) != default_random(32)
