from dataclasses import dataclass
from typing import List, Optional
from .BallotSet import BallotSet
from .Candidate import Candidate
from .Election import Election
from .ElectionResult import ElectionResult
from .PluralityElection import PluralityElection, PluralityResult
from .TieBreak import fractional_weight


@dataclass(frozen=True)
class InstantRunoffRound:
    number: int
    tally: PluralityResult
    winner: Optional[Candidate] = None
    eliminated: Optional[Candidate] = None


class InstantRunoffResult(ElectionResult):
    def __init__(self, ordered_candidates: List[Candidate], rounds: List[InstantRunoffRound]):
        super().__init__(ordered_candidates)
        self.rounds = rounds

    def eliminated(self) -> List[Candidate]:
        return [r.eliminated for r in self.rounds if r.eliminated is not None]


class InstantRunoffElection(Election):
    """
    Ranks candidates by repeated instant runoff.

    Each round either finds a candidate with a strict majority of the active
    ballots, who takes the next ranking position, or eliminates the weakest
    candidate.  Either way that candidate is struck from every ballot and the
    next round is tallied on what is left.  Eliminated candidates are never
    ranked.  Tabulation stops when no ballot has a preference left.
    """

    def __init__(self, ballots: BallotSet, debug: bool = False):
        super().__init__(ballots, debug)

    def result(self) -> InstantRunoffResult:
        return self.compute_result()

    @staticmethod
    def select_elimination(tally: PluralityResult) -> Candidate:
        # fewest first choices loses; the fractional weight only separates equal counts
        scored = [(tally.vote_totals[c] + fractional_weight(c), c) for c in tally.vote_totals]
        return min(scored)[1]

    def compute_result(self) -> InstantRunoffResult:
        ballots = self.ballots
        winners: List[Candidate] = []
        rounds: List[InstantRunoffRound] = []
        round_number = 0

        while True:
            round_number += 1
            tally = PluralityElection(ballots).result()
            if not tally.has_result():
                if self.debug:
                    print(f"round {round_number}: no active ballots, done")
                break

            if self.debug:
                self.print_tally(round_number, tally)

            winner = tally.majority_winner()
            if winner is not None:
                winners.append(winner)
                rounds.append(InstantRunoffRound(round_number, tally, winner=winner))
                if self.debug:
                    print("%-30s wins with %.2f%% of the vote" % (
                        winner.name, tally.vote_totals[winner] / tally.active_ballots * 100))
                ballots = ballots.without(winner)
            else:
                loser = self.select_elimination(tally)
                rounds.append(InstantRunoffRound(round_number, tally, eliminated=loser))
                if self.debug:
                    print("%-30s eliminated with %d votes" % (loser.name, tally.vote_totals[loser]))
                ballots = ballots.without(loser)

        return InstantRunoffResult(winners, rounds)

    def print_tally(self, round_number: int, tally: PluralityResult):
        print(f"round {round_number}: {tally.active_ballots} active ballots, "
              f"majority threshold {tally.majority_threshold():.1f}")
        for c in tally.ordered_candidates:
            print("\t%-30s %6d" % (c.name, tally.vote_totals[c]))
