"""
Item store for a study session.

Concatenates the items of the requested sets, in request order, into one
immutable sequence. Indices into the store are stable for the whole session
and are what the sampler weights refer to.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from kanadrill.application.factory import get_set
from kanadrill.domain.models import StudyItem
from kanadrill.domain.ports import StudySetLoader

logger = logging.getLogger(__name__)

SetLookup = Callable[[str], StudySetLoader | None]


@dataclass(frozen=True)
class ItemStore:
    """Ordered, immutable items plus the names of the sets they came from."""

    items: tuple[StudyItem, ...] = ()
    sets: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> StudyItem:
        return self.items[index]

    def __iter__(self) -> Iterator[StudyItem]:
        return iter(self.items)

    def display_sets(self) -> list[str]:
        """Resolved set names, sorted for display. Item order is unaffected."""
        return sorted(self.sets)


def build_item_store(set_names: Iterable[str], lookup: SetLookup | None = None) -> ItemStore:
    """
    Resolve each requested set and concatenate its items.

    Unknown identifiers are reported and skipped; they never abort the build.

    Args:
        set_names: Identifiers in the order their items should appear.
        lookup: Name -> loader resolver (defaults to the bundled registry).
    """
    lookup = lookup or get_set

    resolved: list[str] = []
    items: list[StudyItem] = []

    for raw_name in set_names:
        set_name = raw_name.strip()
        if not set_name:
            continue

        loader = lookup(set_name)
        if loader is None:
            logger.warning(f"Set '{set_name}' not found.")
            continue

        resolved.append(loader.name)
        items.extend(loader.load())

    logger.info(f"Loaded {len(items)} items from {len(resolved)} set(s)")
    return ItemStore(items=tuple(items), sets=tuple(resolved))
