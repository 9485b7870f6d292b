"""Top-level package for Ctenar.

This package splits Czech text into sentences, words, and syllables for
reading practice. The main entry points are `segment` and `syllabify`.
"""

from .models.datatypes import ReadingMode, TextSegment, VoiceSettings
from .state import ReaderState
from .text import reading_units, segment, split_sentences, split_words, syllabify

__all__ = [
    "ReaderState",
    "ReadingMode",
    "TextSegment",
    "VoiceSettings",
    "__version__",
    "reading_units",
    "segment",
    "split_sentences",
    "split_words",
    "syllabify",
]

__version__ = "0.1.0"
