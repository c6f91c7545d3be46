from rankedchoice.BallotSet import BallotSet
from rankedchoice.Candidate import Candidate
from rankedchoice.PluralityElection import PluralityElection


def test_counts_first_choices(majority_ballots):
    tally = PluralityElection(majority_ballots).result()
    assert tally.vote_totals == {Candidate("a"): 2, Candidate("b"): 1}
    assert tally.active_ballots == 3
    assert tally.ordered_candidates == [Candidate("a"), Candidate("b")]


def test_empty_ballots_do_not_count():
    tally = PluralityElection(BallotSet.from_rows([["a"], [], [], ["b", "a"]])).result()
    assert tally.active_ballots == 2
    assert tally.vote_totals == {Candidate("a"): 1, Candidate("b"): 1}


def test_no_active_ballots_is_no_result():
    tally = PluralityElection(BallotSet.from_rows([[], []])).result()
    assert not tally.has_result()
    assert tally.majority_winner() is None
    assert tally.vote_totals == {}


def test_majority_winner(majority_ballots):
    tally = PluralityElection(majority_ballots).result()
    assert tally.majority_threshold() == 1.5
    assert tally.majority_winner() == Candidate("a")


def test_exactly_half_is_not_a_majority(even_split_ballots):
    tally = PluralityElection(even_split_ballots).result()
    assert tally.majority_threshold() == 1.0
    assert tally.majority_winner() is None


def test_single_ballot_is_a_majority():
    tally = PluralityElection(BallotSet.from_rows([["x", "y"]])).result()
    assert tally.majority_winner() == Candidate("x")
