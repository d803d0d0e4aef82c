"""Study session: item store + adaptive sampler, composed for one process run."""

import logging
import random
from collections.abc import Iterable

from kanadrill.application.item_store import ItemStore, SetLookup, build_item_store
from kanadrill.application.sampler import AdaptiveSampler
from kanadrill.domain.models import StudyItem

logger = logging.getLogger(__name__)


class StudySession:
    """
    Owns the item store, the weight table and its distribution.

    Nothing here does I/O; the prompt loop drives it.
    """

    def __init__(self, store: ItemStore, rng: random.Random | None = None):
        self.store = store
        self.sampler = AdaptiveSampler(len(store), rng=rng)

    @classmethod
    def from_set_names(
        cls,
        set_names: Iterable[str],
        lookup: SetLookup | None = None,
        rng: random.Random | None = None,
    ) -> "StudySession":
        return cls(build_item_store(set_names, lookup=lookup), rng=rng)

    @property
    def items(self) -> tuple[StudyItem, ...]:
        return self.store.items

    @property
    def sets(self) -> tuple[str, ...]:
        return self.store.sets

    @property
    def weights(self) -> list[int]:
        return self.sampler.weights

    def sample(self) -> tuple[int, StudyItem] | None:
        index = self.sampler.draw()
        if index is None:
            return None
        return index, self.store[index]

    def answer(self, index: int, item: StudyItem, response: str) -> bool:
        """
        Score ``response`` against ``item.back`` and update the weights.

        Correct: reset the answered item, then increment everything.
        Incorrect: increment everything. The order matters; a correct answer
        always leaves the item at weight 2.
        """
        correct = response == item.back
        if correct:
            self.sampler.reset(index)
        self.sampler.increment()

        logger.debug(f"Answered {item.front!r} {'correctly' if correct else 'incorrectly'}")
        return correct

    def weighted_items(self) -> list[tuple[int, StudyItem]]:
        """(weight, item) pairs with the heaviest first."""
        pairs = list(zip(self.sampler.weights, self.store.items))
        pairs.sort(key=lambda pair: pair[0], reverse=True)
        return pairs
