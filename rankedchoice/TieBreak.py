from .Candidate import Candidate

# 32 bit FNV-1a parameters
FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
HASH_RANGE = 2 ** 32


class FractionalWeightError(AssertionError):
    """Raised when a tie-break weight falls outside [0.0, 1.0)."""


def fnv1a_32(data: bytes) -> int:
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) % HASH_RANGE
    return h


def fractional_weight(candidate: Candidate) -> float:
    """
    A stable value in [0.0, 1.0) derived from the candidate's name.

    Added to a vote count it orders candidates with equal counts the same way
    on every run, unlike the builtin hash() which is salted per process.
    """
    fraction = fnv1a_32(candidate.name.encode("utf-8")) / HASH_RANGE
    check_fraction(candidate, fraction)
    return fraction


def check_fraction(candidate: Candidate, fraction: float) -> None:
    if not 0.0 <= fraction < 1.0:
        raise FractionalWeightError(f"Unexpected fractional value {fraction} for candidate {candidate.name}")
