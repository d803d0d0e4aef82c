"""
Study Set Factory
Centralizes the closed registry of bundled vocabulary sets.
"""

from kanadrill.domain.ports import StudySetLoader
from kanadrill.infrastructure.sets import HiraganaStudySet, KatakanaStudySet

SET_REGISTRY: dict[str, type[StudySetLoader]] = {
    "hiragana": HiraganaStudySet,
    "katakana": KatakanaStudySet,
}


def get_set(name: str) -> StudySetLoader | None:
    """
    Returns the loader registered under exactly ``name``, or None.
    """
    loader_cls = SET_REGISTRY.get(name)
    if loader_cls is None:
        return None
    return loader_cls()


def available_sets() -> list[str]:
    """Set identifiers in registration order."""
    return list(SET_REGISTRY)
