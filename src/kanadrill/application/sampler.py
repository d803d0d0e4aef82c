"""
Adaptive weighted sampler.

Keeps one integer weight per item (index-aligned with the item store) and a
cumulative-weight distribution derived from it. The distribution is rebuilt
after every weight mutation, so a draw never sees stale weights.

Update rules:
1. ``increment`` adds one to every weight.
2. ``reset`` puts a single weight back to the baseline.
3. Every weight stays >= 1, so every item remains drawable.
"""

import logging
import random
from collections.abc import Sequence
from itertools import accumulate

from kanadrill.domain.constants import INITIAL_WEIGHT, WEIGHT_STEP
from kanadrill.domain.errors import DistributionError

logger = logging.getLogger(__name__)


class WeightedIndex:
    """
    Prefix-sum table over integer weights.

    Build is O(n); each draw is one ``choices`` call over the cumulative weights,
    which bisects them.
    """

    def __init__(self, weights: Sequence[int]):
        if not weights:
            raise DistributionError("Cannot build a distribution from an empty weight table")
        if any(w < 0 for w in weights):
            raise DistributionError(f"Negative weight in weight table: {list(weights)}")

        self.cumulative = list(accumulate(weights))
        self.total = self.cumulative[-1]

        if self.total <= 0:
            raise DistributionError("All weights are zero")

    def __len__(self) -> int:
        return len(self.cumulative)

    def sample(self, rng: random.Random) -> int:
        """Draw index i with probability weights[i] / total."""
        return rng.choices(range(len(self.cumulative)), cum_weights=self.cumulative, k=1)[0]


class AdaptiveSampler:
    """
    Weight table plus its cached distribution, scoped to one session.
    """

    def __init__(self, item_count: int = 0, rng: random.Random | None = None):
        # Random(None) seeds from OS entropy
        self.rng = rng if rng is not None else random.Random()
        self._weights: list[int] = []
        self._dist: WeightedIndex | None = None
        self.initialize(item_count)

    @property
    def weights(self) -> list[int]:
        return list(self._weights)

    @property
    def distribution(self) -> WeightedIndex | None:
        """Distribution built from the current weights; None when empty."""
        return self._dist

    def __len__(self) -> int:
        return len(self._weights)

    def initialize(self, item_count: int) -> None:
        """Set every weight to the baseline; no distribution when there are no items."""
        self._weights = [INITIAL_WEIGHT] * item_count
        self._dist = None
        self._sync()

    def _sync(self) -> None:
        if self._weights:
            self._dist = WeightedIndex(self._weights)
        else:
            self._dist = None

    def draw(self) -> int | None:
        """Weighted-random index, or None when there is nothing to draw."""
        if self._dist is None:
            return None
        return self._dist.sample(self.rng)

    def increment(self) -> None:
        self._weights = [w + WEIGHT_STEP for w in self._weights]
        self._sync()

    def reset(self, index: int) -> None:
        """Put ``index`` back to the baseline. Out-of-range indices are ignored."""
        if 0 <= index < len(self._weights):
            self._weights[index] = INITIAL_WEIGHT
            self._sync()
        else:
            logger.debug(f"Ignoring reset of out-of-range index {index}")
