from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
# modular inverse of A (so we can step backward exactly)
INV_A = 1407677000  # because (A * INV_A) % M == 1


def pm_next(state: int) -> int:
    return (state * A) % M


def pm_prev(state: int) -> int:
    return (state * INV_A) % M


def normalize_seed(seed: int) -> int:
    # Park–Miller state must be in 1..M-1; 0 would lock the generator at 0.
    s = seed % M
    return s if s != 0 else 1


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return (self.next32() - 1) / (M - 1)

    def bounded(self, n: int) -> int:
        """Uniform int in 1..n inclusive."""
        assert n > 0
        return int(self.random() * n) + 1

    def chance(self, p: float) -> bool:
        return self.random() < p

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.bounded(len(seq)) - 1]


def seed_for_level(base_seed: int, level: int) -> int:
    """Derive a per-level seed by stepping the base stream `level` times."""
    s = normalize_seed(base_seed)
    for _ in range(max(0, level)):
        s = pm_next(s)
    return s
