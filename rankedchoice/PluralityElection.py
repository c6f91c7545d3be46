from typing import Dict, List, Optional
from .BallotSet import BallotSet
from .Candidate import Candidate
from .Election import Election
from .ElectionResult import ElectionResult


class PluralityResult(ElectionResult):
    def __init__(self, ordered_candidates: List[Candidate], vote_totals: Dict[Candidate, int], active_ballots: int):
        super().__init__(ordered_candidates)
        self.vote_totals = vote_totals
        self.active_ballots = active_ballots

    def has_result(self) -> bool:
        return self.active_ballots > 0

    def majority_threshold(self) -> float:
        # float, so that exactly half of the active ballots is not a majority
        return self.active_ballots / 2.0

    def majority_winner(self) -> Optional[Candidate]:
        if not self.has_result():
            return None
        threshold = self.majority_threshold()
        for c in sorted(self.vote_totals):
            if self.vote_totals[c] > threshold:
                return c
        return None


class PluralityElection(Election):
    """Counts the first choice of every non-empty ballot once."""

    def __init__(self, ballots: BallotSet, debug: bool = False):
        super().__init__(ballots, debug)
        self.vote_totals: Dict[Candidate, int] = {}
        self.active_ballots = 0
        self.ordered_candidates: List[Candidate] = self.compute_results()

    def compute_results(self) -> List[Candidate]:
        for b in self.ballots:
            w = b.first_choice()
            if w is None:
                continue
            self.active_ballots += 1
            self.vote_totals[w] = self.vote_totals.get(w, 0) + 1

        c_list = sorted(self.vote_totals.items(), key=lambda p: (-p[1], p[0]))
        return [c for c, _ in c_list]

    def result(self) -> PluralityResult:
        return PluralityResult(self.ordered_candidates, self.vote_totals, self.active_ballots)
