import pytest
from pydantic import ValidationError

from fips_dsa.config import GeneratorConfig, default_n_bits
from fips_dsa.generators.generator_g import GeneratorMethod


def test_defaults():
    cfg = GeneratorConfig(l_bits=1024)
    assert cfg.n_bits == 160
    assert cfg.certainty == 80
    assert cfg.digest == "sha256"
    assert cfg.generator_method is GeneratorMethod.UNVERIFIABLE
    assert cfg.generator_index == 1
    assert cfg.max_attempts is None
    assert cfg.uses_legacy_search


def test_default_n_for_large_l():
    cfg = GeneratorConfig(l_bits=3072)
    assert cfg.n_bits == 256
    assert not cfg.uses_legacy_search
    assert default_n_bits(1024) == 160
    assert default_n_bits(1025) == 256


def test_frozen():
    cfg = GeneratorConfig(l_bits=512)
    with pytest.raises(ValidationError):
        cfg.certainty = 100


def test_generator_method_from_string():
    cfg = GeneratorConfig(l_bits=2048, n_bits=224, generator_method="verifiable")
    assert cfg.generator_method is GeneratorMethod.VERIFIABLE


@pytest.mark.parametrize("kwargs", [
    {"l_bits": 2048, "digest": "md4"},
    {"l_bits": 512, "certainty": 0},
    {"l_bits": 576, "n_bits": 224},
    {"l_bits": 2048, "n_bits": 2048},
    {"l_bits": 2048, "generator_index": -1},
])
def test_rejected(kwargs):
    with pytest.raises(ValidationError):
        GeneratorConfig(**kwargs)


def test_hyphenated_digest_name_accepted():
    cfg = GeneratorConfig(l_bits=2048, n_bits=224, digest="SHA-224")
    assert cfg.digest == "SHA-224"
