import pytest

from rankedchoice.BallotSet import BallotSet


@pytest.fixture
def majority_ballots():
    return BallotSet.from_rows([["A", "B"], ["A", "B"], ["B", "A"]])


@pytest.fixture
def even_split_ballots():
    return BallotSet.from_rows([["A", "B"], ["B", "A"]])


@pytest.fixture
def symmetric_ballots():
    return BallotSet.from_rows([["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"]])
