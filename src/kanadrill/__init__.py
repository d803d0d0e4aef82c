"""kana-drill: adaptive weighted drills for Japanese kana."""

__version__ = "0.1.0"
