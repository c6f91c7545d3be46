from typing import Dict, List, Tuple

import numpy as np

from .BallotSet import BallotSet
from .Candidate import Candidate
from .Election import Election
from .ElectionResult import ElectionResult


class HeadToHeadResult(ElectionResult):
    def __init__(self, ordered_candidates: List[Candidate], result_matrix: np.ndarray, indices: Dict[Candidate, int]):
        super().__init__(ordered_candidates)
        self.result_matrix: np.ndarray = result_matrix
        self.candidate_to_index = indices

    def votes(self, c1: Candidate, c2: Candidate) -> int:
        return int(self.result_matrix[self.candidate_to_index[c1], self.candidate_to_index[c2]])

    def print_matrix(self, count=4):
        for c1 in self.ordered_candidates[0:count]:
            print(f"results for {c1.name}:")
            for c2 in self.ordered_candidates[0:count]:
                if c1 != c2:
                    v1 = self.votes(c1, c2)
                    v2 = self.votes(c2, c1)
                    t = v1 + v2
                    if t == 0:
                        continue
                    print("%30s %7d %6.2f%% %30s %7d %6.2f%% % 7d" % (
                        c1.name, v1, 100 * v1 / t, c2.name, v2, 100 * v2 / t, v1 - v2))
            print("")


class HeadToHeadElection(Election):
    """
    Pairwise comparison of every candidate against every other.

    result_matrix[i, j] counts the ballots that prefer candidate i to
    candidate j.  A ranked candidate is preferred to any unranked one.
    """

    def __init__(self, ballots: BallotSet, debug: bool = False):
        super().__init__(ballots, debug)
        self.candidate_list = ballots.candidates()
        self.indices = {c: i for i, c in enumerate(self.candidate_list)}
        self.result_matrix = self.compute_matrix()

    def result(self) -> HeadToHeadResult:
        return HeadToHeadResult(self.minimax(), self.result_matrix, self.indices)

    def compute_matrix(self) -> np.ndarray:
        n_candidates = len(self.candidate_list)
        results = np.zeros([n_candidates, n_candidates], dtype=int)
        for b in self.ballots:
            not_seen = set(self.candidate_list)
            for c1 in b.ordered_candidates:
                not_seen.remove(c1)
                row_i = self.indices[c1]
                for c2 in not_seen:
                    results[row_i, self.indices[c2]] += 1

        return results

    # returns votes for c1 - votes for c2
    def delta(self, c1: Candidate, c2: Candidate) -> int:
        r = self.indices[c1]
        c = self.indices[c2]
        return int(self.result_matrix[r, c] - self.result_matrix[c, r])

    def max_loss(self, candidate: Candidate, active_candidates: List[Candidate]) -> int:
        losses = [-self.delta(candidate, c2) for c2 in active_candidates if c2 != candidate]
        if not losses:
            return 0
        return max(losses)

    def minimax(self) -> List[Candidate]:
        remaining = list(self.candidate_list)
        ordered = []
        while remaining:
            max_losses: List[Tuple[int, Candidate]] = [(self.max_loss(c, remaining), c) for c in remaining]
            winner = min(max_losses)[1]
            ordered.append(winner)
            remaining.remove(winner)
        return ordered
