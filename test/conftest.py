import pytest

from fips_dsa.prng import DigestRandomGenerator
from helpers import CountingGenerator, FixedRandom


@pytest.fixture
def counting_generator():
    return CountingGenerator()


@pytest.fixture
def deterministic_random():
    return DigestRandomGenerator(b"fips-dsa test suite")


@pytest.fixture
def fips186_2_example_random():
    # FIPS 186-2 Appendix 5 example seed
    seed = bytes.fromhex("d5014e4b60ef2ba8b6211b4062ba3224e0427dd3")
    return FixedRandom(seed, DigestRandomGenerator(b"appendix 5 generator"))
