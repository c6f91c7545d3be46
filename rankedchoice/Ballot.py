from dataclasses import dataclass
from typing import Iterable, Optional, Set, Tuple
from .Candidate import Candidate


@dataclass(frozen=True)
class Ballot:
    ordered_candidates: Tuple[Candidate, ...] = ()

    @staticmethod
    def from_names(names: Iterable[str]) -> "Ballot":
        """
        Build a ballot from raw preference names, most preferred first.

        Names are compared case-insensitively; a repeated name keeps only its
        first (highest) ranking.
        """
        seen: Set[Candidate] = set()
        ordered = []
        for name in names:
            candidate = Candidate(name)
            if candidate in seen:
                continue
            seen.add(candidate)
            ordered.append(candidate)
        return Ballot(tuple(ordered))

    def is_active(self) -> bool:
        return len(self.ordered_candidates) > 0

    def first_choice(self) -> Optional[Candidate]:
        if self.ordered_candidates:
            return self.ordered_candidates[0]
        return None

    def without(self, candidate: Candidate) -> "Ballot":
        if candidate not in self.ordered_candidates:
            return self
        return Ballot(tuple(c for c in self.ordered_candidates if c != candidate))

    def __len__(self) -> int:
        return len(self.ordered_candidates)
