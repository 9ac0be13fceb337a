import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RNG(random.Random):
    """Seeded RNG; every random draw in generation goes through one of these."""

    def coin_flip(self) -> bool:
        return self.random() < 0.5

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Single uniform draw against cumulative weights (weights need not sum to 1)."""
        if not items or len(items) != len(weights):
            raise ValueError("weighted_choice needs one weight per item")
        total = float(sum(weights))
        roll = self.random() * total
        acc = 0.0
        for item, w in zip(items, weights):
            acc += w
            if roll < acc:
                return item
        return items[-1]


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
