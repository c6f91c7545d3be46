import pytest

from rankedchoice import TieBreak
from rankedchoice.Candidate import Candidate
from rankedchoice.TieBreak import FractionalWeightError, fnv1a_32, fractional_weight


def test_fnv1a_known_values():
    assert fnv1a_32(b"") == 0x811C9DC5
    assert fnv1a_32(b"a") == 0xE40C292C
    assert fnv1a_32(b"b") == 0xE70C2DE5
    assert fnv1a_32(b"c") == 0xE60C2C52


def test_fractional_weight_in_range():
    for name in ["", "a", "alice", "Bob", "élodie", "x" * 200]:
        weight = fractional_weight(Candidate(name))
        assert 0.0 <= weight < 1.0


def test_fractional_weight_is_stable():
    assert fractional_weight(Candidate("a")) == 0xE40C292C / 2 ** 32
    assert fractional_weight(Candidate("A")) == fractional_weight(Candidate("a"))


def test_out_of_range_weight_is_fatal(monkeypatch):
    monkeypatch.setattr(TieBreak, "fnv1a_32", lambda data: TieBreak.HASH_RANGE)
    with pytest.raises(FractionalWeightError):
        fractional_weight(Candidate("a"))


def test_fractional_weight_error_is_an_assertion():
    assert issubclass(FractionalWeightError, AssertionError)
