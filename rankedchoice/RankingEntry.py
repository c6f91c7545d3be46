from dataclasses import dataclass
from .Candidate import Candidate


@dataclass(frozen=True)
class RankingEntry:
    position: int
    candidate: Candidate

    def __str__(self) -> str:
        return f"{self.position}: {self.candidate.name}"
