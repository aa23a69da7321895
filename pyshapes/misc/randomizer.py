from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class Randomizer:
    """
    Seeded random source for shape sampling. Use to ensure reproducible
    random points across runs when a seed is provided.

    Any object with random() and choice() methods can be used in its place,
    including random.Random instances and the random module itself.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def random(self) -> float:
        return self.rng.random()

    def choice(self, options: Sequence[T]) -> T:
        return self.rng.choice(options)

    def reset(self, seed: Optional[int] = None):
        """Restart the sequence, keeping the original seed unless a new one is given."""
        if seed is not None:
            self.seed = seed
        self.rng = random.Random(self.seed)
