"""
Domain models for study items.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StudyItem:
    """
    A single prompt and the answer expected for it.

    Attributes:
        front: Text shown to the learner.
        back: Exact (case-sensitive) answer expected.
    """

    front: str
    back: str
