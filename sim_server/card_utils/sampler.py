import random
from typing import Any, List, Optional, Sequence


class Sampler:
    """Uniform draws from card tiers.

    `rng` is anything with a ``random()`` method returning a float in [0, 1).
    Left unset, every Sampler gets its own unseeded ``random.Random``, so two
    openings never repeat. Tests pass a scripted source instead.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def _index(self, size: int) -> int:
        return int(self.rng.random() * size)

    def roll(self) -> float:
        return self.rng.random()

    def draw_one(self, pool: Sequence[Any]) -> Optional[Any]:
        """Pick one element, leaving the pool untouched. None if the pool is empty."""
        if not pool:
            return None
        return pool[self._index(len(pool))]

    def draw_many(self, pool: Sequence[Any], count: int) -> List[Any]:
        """Pick up to `count` elements without replacement within this call.

        Works on a copy of `pool`; returns fewer than `count` elements when the
        pool runs out.
        """
        working = list(pool)
        selected = []
        for _ in range(count):
            if not working:
                break
            selected.append(working.pop(self._index(len(working))))
        return selected

    def draw_first(self, *pools: Sequence[Any]) -> Optional[Any]:
        """Draw from the first non-empty pool of a fallback chain."""
        for pool in pools:
            if pool:
                return self.draw_one(pool)
        return None

    def shuffle(self, pool: Sequence[Any]) -> List[Any]:
        return self.draw_many(pool, len(pool))
