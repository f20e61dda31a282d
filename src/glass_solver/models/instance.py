from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class Instance:
    """One problem: glass capacities and the wanted final levels."""

    capacities: Tuple[int, ...] = field(default_factory=tuple)
    targets: Tuple[int, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.capacities)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> "Instance":
        """Build from (capacity, target) pairs, dropping glasses that cannot hold water."""
        kept = [(cap, goal) for cap, goal in pairs if cap > 0]
        return cls(
            capacities=tuple(cap for cap, _ in kept),
            targets=tuple(goal for _, goal in kept),
        )
