# test/helpers.py
"""Shared test doubles and independent hashlib replays of the FIPS 186 derivations."""
import hashlib

from fips_dsa.crypto.primitives import is_probable_prime
from fips_dsa.prng import RandomGenerator
from fips_dsa.prng.base import check_region, seed_to_bytes


class CountingGenerator(RandomGenerator):
    """Emits 0, 1, 2, ... (mod 256) and records seed material; not thread safe on its own."""

    def __init__(self):
        self.value = 0
        self.seeds = []

    def add_seed_material(self, seed):
        self.seeds.append(seed_to_bytes(seed))

    def next_bytes(self, buf, start=0, length=None):
        length = check_region(buf, start, length)
        for i in range(start, start + length):
            buf[i] = self.value & 0xFF
            self.value += 1


class FixedRandom:
    """Serves ``prefix`` first, then bytes from ``fallback``."""

    def __init__(self, prefix: bytes, fallback):
        self._prefix = bytearray(prefix)
        self._fallback = fallback

    def __call__(self, nbytes: int) -> bytes:
        out = bytes(self._prefix[:nbytes])
        del self._prefix[:nbytes]
        if len(out) < nbytes:
            out += self._fallback(nbytes - len(out))
        return out


def _p_from_w(w: int, l_bits: int, q: int) -> int:
    x = w + (1 << (l_bits - 1))
    return x - (x % (2 * q) - 1)


def replay_fips186_2(seed: bytes, counter: int, l_bits: int):
    """Recompute (q, p) from a FIPS 186-2 seed/counter with hashlib only."""
    g = len(seed) * 8
    s = int.from_bytes(seed, "big")

    def sha1_at(v: int) -> int:
        return int.from_bytes(hashlib.sha1((v % (1 << g)).to_bytes(len(seed), "big")).digest(), "big")

    u = sha1_at(s) ^ sha1_at(s + 1)
    q = u | (1 << 159) | 1

    n = (l_bits - 1) // 160
    b = (l_bits - 1) - n * 160
    offset = 2 + counter * (n + 1)
    w = 0
    for k in range(n + 1):
        v = sha1_at(s + offset + k)
        if k == n:
            v %= 1 << b
        w += v << (k * 160)
    return q, _p_from_w(w, l_bits, q)


def replay_fips186_3(seed: bytes, counter: int, l_bits: int, n_bits: int, hash_name: str = "sha256"):
    """Recompute (q, p) from a FIPS 186-3 seed/counter with hashlib only."""
    seedlen = len(seed) * 8
    s = int.from_bytes(seed, "big")

    def h(v: int) -> int:
        return int.from_bytes(hashlib.new(hash_name, (v % (1 << seedlen)).to_bytes(len(seed), "big")).digest(), "big")

    outlen = hashlib.new(hash_name).digest_size * 8
    u = h(s) % (1 << (n_bits - 1))
    q = (1 << (n_bits - 1)) + u + 1 - (u % 2)

    n = -(-l_bits // outlen) - 1
    b = l_bits - 1 - n * outlen
    offset = 1 + counter * (n + 1)
    w = 0
    for j in range(n + 1):
        v = h(s + offset + j)
        if j == n:
            v %= 1 << b
        w += v << (j * outlen)
    return q, _p_from_w(w, l_bits, q)


def assert_domain_invariants(params, l_bits, n_bits):
    p, q, g = params.p, params.q, params.g
    assert q.bit_length() == n_bits
    assert p.bit_length() == l_bits
    assert is_probable_prime(q, 80)
    assert is_probable_prime(p, 80)
    assert (p - 1) % q == 0
    assert 2 <= g < p
    assert pow(g, q, p) == 1
