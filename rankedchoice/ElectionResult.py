from typing import List, Optional
from .Candidate import Candidate
from .RankingEntry import RankingEntry


class ElectionResult:
    def __init__(self, ordered_candidates: List[Candidate]):
        self.ordered_candidates = ordered_candidates

    def winner(self) -> Optional[Candidate]:
        if not self.ordered_candidates:
            return None
        return self.ordered_candidates[0]

    def ranking(self) -> List[RankingEntry]:
        return [RankingEntry(i, c) for i, c in enumerate(self.ordered_candidates, start=1)]

    def format_ranking(self) -> str:
        return "\n".join(str(entry) for entry in self.ranking())
