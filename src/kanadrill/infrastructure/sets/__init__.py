# Bundled Vocabulary Sets
from .csv_set import CsvStudySet, parse_records
from .hiragana import HiraganaStudySet
from .katakana import KatakanaStudySet

__all__ = ["CsvStudySet", "HiraganaStudySet", "KatakanaStudySet", "parse_records"]
