"""Text segmentation components.

This package provides the deterministic sentence, word, and syllable
segmentation used to build reading units.
"""

from .segmenter import reading_units, segment
from .sentences import split_sentences
from .syllables import DEFAULT_POLICY, Syllabifier, SyllabificationPolicy, syllabify
from .words import split_words

__all__ = [
    "DEFAULT_POLICY",
    "Syllabifier",
    "SyllabificationPolicy",
    "reading_units",
    "segment",
    "split_sentences",
    "split_words",
    "syllabify",
]
