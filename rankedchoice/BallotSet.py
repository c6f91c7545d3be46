from typing import Iterable, Iterator, List, Tuple
from .Ballot import Ballot
from .Candidate import Candidate


class BallotSet:
    """
    The ballots of one tabulation.

    A BallotSet is never modified once built.  Removing a candidate produces a
    new BallotSet, so each round works on its own snapshot.  Empty ballots are
    kept; they are simply inactive.
    """

    def __init__(self, ballots: Iterable[Ballot] = ()):
        self._ballots: Tuple[Ballot, ...] = tuple(ballots)

    @staticmethod
    def from_rows(rows: Iterable[Iterable[str]]) -> "BallotSet":
        return BallotSet(Ballot.from_names(row) for row in rows)

    @property
    def ballots(self) -> Tuple[Ballot, ...]:
        return self._ballots

    def without(self, candidate: Candidate) -> "BallotSet":
        return BallotSet(b.without(candidate) for b in self._ballots)

    def candidates(self) -> List[Candidate]:
        found = set()
        for b in self._ballots:
            found.update(b.ordered_candidates)
        return sorted(found)

    def __iter__(self) -> Iterator[Ballot]:
        return iter(self._ballots)

    def __len__(self) -> int:
        return len(self._ballots)

    def __repr__(self) -> str:
        return f"BallotSet({len(self._ballots)} ballots)"
