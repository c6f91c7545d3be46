from rankedchoice.Ballot import Ballot
from rankedchoice.BallotSet import BallotSet
from rankedchoice.Candidate import Candidate


def test_candidate_is_case_insensitive():
    assert Candidate("Alice") == Candidate("ALICE")
    assert hash(Candidate("Alice")) == hash(Candidate("alice"))
    assert Candidate("Alice").name == "alice"


def test_from_names_lowercases_and_keeps_first_ranking():
    ballot = Ballot.from_names(["Bob", "alice", "BOB", "Carol", "ALICE"])
    assert [c.name for c in ballot.ordered_candidates] == ["bob", "alice", "carol"]


def test_from_names_empty():
    ballot = Ballot.from_names([])
    assert not ballot.is_active()
    assert ballot.first_choice() is None


def test_empty_string_is_a_candidate():
    ballot = Ballot.from_names(["a", ""])
    assert ballot.ordered_candidates == (Candidate("a"), Candidate(""))


def test_without_removes_candidate_anywhere():
    ballot = Ballot.from_names(["a", "b", "c"])
    assert ballot.without(Candidate("b")).ordered_candidates == (Candidate("a"), Candidate("c"))
    assert ballot.without(Candidate("a")).first_choice() == Candidate("b")
    assert ballot.without(Candidate("z")) is ballot


def test_ballot_set_without_leaves_original_untouched():
    original = BallotSet.from_rows([["a", "b"], ["b"], []])
    derived = original.without(Candidate("b"))

    assert [len(b) for b in original] == [2, 1, 0]
    assert [len(b) for b in derived] == [1, 0, 0]
    assert len(derived) == 3
    assert sum(1 for b in derived if b.is_active()) == 1


def test_ballot_set_candidates_sorted_and_distinct():
    ballots = BallotSet.from_rows([["Carol", "alice"], ["ALICE", "bob"]])
    assert [c.name for c in ballots.candidates()] == ["alice", "bob", "carol"]
