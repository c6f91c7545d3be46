from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Candidate:
    name: str

    def __post_init__(self):
        # identity is case-insensitive, so only the canonical form is ever stored
        object.__setattr__(self, "name", self.name.lower())

    def __str__(self) -> str:
        return self.name
