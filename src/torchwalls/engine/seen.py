# src/torchwalls/engine/seen.py
# Per-tile "freshness" counters.
#   0        never seen
#   1        seen, fully faded (floor; a tile never forgets it was seen)
#   >1       ticks of freshness left; set to max_age by a torch ray hit

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List


@dataclass
class TileSeenRecord:
    size: int
    max_age: int
    edge_tiles: FrozenSet[int] = frozenset()
    ages: List[int] = field(default_factory=list)
    _seen_edges: int = 0

    def __post_init__(self) -> None:
        if self.max_age < 2:
            raise ValueError("max_age must be >= 2 so a fresh tile can fade to 1")
        if not self.ages:
            self.ages = [0] * self.size
        elif len(self.ages) != self.size:
            raise ValueError("ages must have one entry per tile")
        self.edge_tiles = frozenset(self.edge_tiles)
        self._seen_edges = sum(1 for i in self.edge_tiles if self.ages[i] > 0)

    @classmethod
    def fresh(cls, size: int, max_age: int, edge_tiles: Iterable[int] = ()) -> "TileSeenRecord":
        return cls(size=size, max_age=max_age, edge_tiles=frozenset(edge_tiles))

    def __getitem__(self, index: int) -> int:
        return self.ages[index]

    def mark(self, index: int) -> None:
        if self.ages[index] == 0 and index in self.edge_tiles:
            self._seen_edges += 1
        self.ages[index] = self.max_age

    def decay(self) -> None:
        ages = self.ages
        for i, a in enumerate(ages):
            if a > 1:
                ages[i] = a - 1

    def is_seen(self, index: int) -> bool:
        return self.ages[index] > 0

    def is_faded(self, index: int, fade_age: int) -> bool:
        return 0 < self.ages[index] < fade_age

    @property
    def seen_count(self) -> int:
        return sum(1 for a in self.ages if a > 0)

    @property
    def seen_edge_count(self) -> int:
        return self._seen_edges

    @property
    def edge_total(self) -> int:
        return len(self.edge_tiles)

    def explored_fraction(self) -> float:
        if not self.edge_tiles:
            return 1.0
        return self._seen_edges / len(self.edge_tiles)
