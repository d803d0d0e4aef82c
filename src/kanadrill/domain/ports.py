"""
Ports (interfaces) for vocabulary sets.

These define the contract that infrastructure set loaders must implement.
The item store depends on this abstraction, not on concrete loaders.
"""

from abc import ABC, abstractmethod

from .models import StudyItem


class StudySetLoader(ABC):
    """
    Port for loading a named vocabulary set.

    Implementations:
        - HiraganaStudySet: bundled hiragana.csv (romaji,kana rows).
        - KatakanaStudySet: bundled katakana.csv (kana,romaji rows).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical identifier used to select the set."""
        pass

    @abstractmethod
    def load(self) -> list[StudyItem]:
        """
        Parse the set's source into study items.

        Returns:
            Items in source order. Loading is deterministic and has no side
            effects on the source, so repeated calls return equal lists.
        """
        pass
