import json

from fips_dsa import cli
from fips_dsa.generators import base
from fips_dsa.params import DomainParameters
from helpers import assert_domain_invariants


def test_legacy_run_to_file(tmp_path):
    out = tmp_path / "params.json"
    rc = cli.main(["--L", "512", "--seed-material", "00ff", "--out", str(out)])
    assert rc == 0
    obj = json.loads(out.read_text())
    assert (obj["L"], obj["N"]) == (512, 160)
    assert_domain_invariants(DomainParameters.from_dict(obj), 512, 160)


def test_seed_material_is_reproducible(tmp_path):
    a, b = tmp_path / "a.json", tmp_path / "b.json"
    assert cli.main(["--L", "512", "--seed-material", "0102", "--out", str(a)]) == 0
    assert cli.main(["--L", "512", "--seed-material", "0102", "--out", str(b)]) == 0
    assert a.read_bytes() == b.read_bytes()


def test_stdout(capsys):
    assert cli.main(["--L", "512", "--seed-material", "aa", "--generator", "verifiable"]) == 0
    obj = json.loads(capsys.readouterr().out)
    assert obj["N"] == 160


def test_invalid_length():
    assert cli.main(["--L", "1000"]) == 2


def test_invalid_pair():
    assert cli.main(["--L", "2048", "--N", "256", "--digest", "sha1"]) == 2


def test_bad_seed_material():
    assert cli.main(["--L", "512", "--seed-material", "xyz"]) == 2


def test_budget_exhausted(monkeypatch):
    monkeypatch.setattr(base, "is_probable_prime", lambda n, certainty: False)
    assert cli.main(["--L", "512", "--max-attempts", "2", "--seed-material", "01"]) == 1
