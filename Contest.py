from typing import Iterable, List

from rankedchoice.Ballot import Ballot
from rankedchoice.BallotSet import BallotSet
from rankedchoice.HeadToHeadElection import HeadToHeadElection
from rankedchoice.InstantRunoffElection import InstantRunoffElection, InstantRunoffResult
from rankedchoice.PluralityElection import PluralityResult


class Contest:
    def __init__(self, name: str):
        self.name = name
        self.ballots: List[Ballot] = []
        self.valid_ballots = 0
        self.under_votes = 0
        self.multiple_rankings = 0

    def add_row(self, names: Iterable[str]):
        names = list(names)
        ballot = Ballot.from_names(names)
        # a name repeated on the same ballot (in any case) keeps its first ranking only
        self.multiple_rankings += len(names) - len(ballot)
        if ballot.is_active():
            self.valid_ballots += 1
        else:
            self.under_votes += 1
        self.ballots.append(ballot)

    def add_rows(self, rows: Iterable[Iterable[str]]):
        for row in rows:
            self.add_row(row)

    def ballot_set(self) -> BallotSet:
        return BallotSet(self.ballots)

    def run_election(self, debug: bool = False) -> InstantRunoffResult:
        return InstantRunoffElection(self.ballot_set(), debug=debug).result()

    def print_stat(self, prefix, count, explanation):
        print("%20s %7d %s" % (prefix, count, explanation))

    def print_stats(self):
        print(f"{self.name}")
        self.print_stat("Valid Ballots", self.valid_ballots, "ballots with at least one ranking")
        self.print_stat("Under Votes", self.under_votes, "no rankings on the ballot")
        self.print_stat("Multiple Rankings", self.multiple_rankings, "single candidate ranked at multiple levels")
        self.print_stat("Candidates", len(self.ballot_set().candidates()), "distinct candidates ranked")
        print("")

    def print_plurality(self, plurality_result: PluralityResult):
        for c in plurality_result.ordered_candidates:
            print("%30s %7d" % (c.name, plurality_result.vote_totals[c]))

    def print_irv_result(self, irv_result: InstantRunoffResult):
        for irv_round in irv_result.rounds:
            print(f"irvRound: {irv_round.number}")
            self.print_plurality(irv_round.tally)
            if irv_round.winner is not None:
                print(f"winner: {irv_round.winner.name}")
            else:
                print(f"eliminated: {irv_round.eliminated.name}")
        print("")

    def print_pairwise(self):
        h2h = HeadToHeadElection(self.ballot_set())
        print("Condorcet Pairwise Comparisons")
        h2h.result().print_matrix(len(h2h.candidate_list))
