"""Sentence, word, and syllable segment assembly.

Responsibilities:
- Compose sentence splitting, word tokenization, and syllabification into
  per-sentence segments.
- Project segments into reading units for the active reading mode.
"""

from __future__ import annotations

from ..models.datatypes import ReadingMode, ReadingUnit, TextSegment, UnitKind
from .sentences import split_sentences
from .syllables import Syllabifier
from .words import split_words


def segment(text: str, syllabifier: Syllabifier | None = None) -> list[TextSegment]:
    """Return one segment per sentence with syllables for every word.

    Args:
        text: Source text; an empty string yields no segments.
        syllabifier: Optional syllabifier carrying a non-default policy.

    Returns:
        Segments in text order.
    """

    active = syllabifier or Syllabifier()
    return [
        TextSegment(
            text=sentence,
            syllables=[active.syllabify(word) for word in split_words(sentence)],
        )
        for sentence in split_sentences(text)
    ]


def reading_units(segments: list[TextSegment], mode: ReadingMode) -> list[ReadingUnit]:
    """Flatten segments into the units rendered and spoken for `mode`."""

    kind = ReadingMode(mode).unit_kind
    units: list[ReadingUnit] = []
    for sentence_index, item in enumerate(segments):
        if kind is UnitKind.SENTENCE:
            units.append(
                ReadingUnit(text=item.text, kind=UnitKind.SENTENCE, sentence_index=sentence_index)
            )
            continue
        for word_index, syllables in enumerate(item.syllables):
            if kind is UnitKind.WORD:
                units.append(
                    ReadingUnit(
                        text="".join(syllables),
                        kind=UnitKind.WORD,
                        sentence_index=sentence_index,
                        word_index=word_index,
                    )
                )
                continue
            units.extend(
                ReadingUnit(
                    text=syllable,
                    kind=UnitKind.SYLLABLE,
                    sentence_index=sentence_index,
                    word_index=word_index,
                    syllable_index=syllable_index,
                )
                for syllable_index, syllable in enumerate(syllables)
            )
    return units
