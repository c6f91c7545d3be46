from .ElectionResult import ElectionResult
from .BallotSet import BallotSet


class Election:
    def __init__(self, ballots: BallotSet, debug: bool = False):
        self.ballots = ballots
        self.debug = debug

    def result(self) -> ElectionResult:
        pass
