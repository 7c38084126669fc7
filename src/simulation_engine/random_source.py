import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Single pseudo-random stream shared by one simulation run.

    Pass a seed for reproducible drafts; leave it as None to seed from
    system entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def random(self) -> float:
        return self._random.random()

    def uniform(self, a: float, b: float) -> float:
        return self._random.uniform(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        return self._random.choice(seq)
