"""Core datatypes shared across Ctenar modules.

Responsibilities:
- Represent immutable records exchanged between segmentation, session, and CLI.
- Keep reading mode and unit kinds as explicit enumerations.

Key types:
- `ReadingMode`, `UnitKind`, `TextSegment`, `ReadingUnit`, `Voice`,
  and `VoiceSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnitKind(str, Enum):
    """Granularity of one text unit."""

    SYLLABLE = "syllable"
    WORD = "word"
    SENTENCE = "sentence"


class ReadingMode(str, Enum):
    """Granularity selected for rendering and speaking."""

    SYLLABLES = "syllables"
    WORDS = "words"
    SENTENCES = "sentences"

    @property
    def unit_kind(self) -> UnitKind:
        """Return the unit kind rendered in this mode."""

        return _MODE_UNIT_KINDS[self]


_MODE_UNIT_KINDS = {
    ReadingMode.SYLLABLES: UnitKind.SYLLABLE,
    ReadingMode.WORDS: UnitKind.WORD,
    ReadingMode.SENTENCES: UnitKind.SENTENCE,
}


@dataclass(frozen=True, slots=True)
class TextSegment:
    """One sentence with its per-word syllable breakdown.

    Attributes:
        text: Trimmed sentence text including trailing punctuation.
        syllables: Per-word syllable lists in reading order.
        kind: Unit kind of the segment; the assembler emits sentences.

    Segments compare by value but are not hashable: `syllables` holds lists
    matching the JSON shape. Treat them as read-only; `segment()` rebuilds them
    whenever the text changes.
    """

    text: str
    syllables: list[list[str]]
    kind: UnitKind = UnitKind.SENTENCE

    __hash__ = None  # type: ignore[assignment]

    @property
    def words(self) -> list[str]:
        """Return word tokens rebuilt from their syllables."""

        return ["".join(word) for word in self.syllables]


@dataclass(frozen=True, slots=True)
class ReadingUnit:
    """One renderable and speakable unit of a segmented text.

    Attributes:
        text: Unit text as it appears in the source.
        kind: Unit granularity.
        sentence_index: 0-based sentence position.
        word_index: 0-based word position within the sentence, `None` for sentences.
        syllable_index: 0-based syllable position within the word, `None` unless
            the unit is a syllable.
    """

    text: str
    kind: UnitKind
    sentence_index: int
    word_index: int | None = None
    syllable_index: int | None = None


@dataclass(frozen=True, slots=True)
class Voice:
    """Read-only handle to a voice reported by a speech engine."""

    id: str
    name: str
    languages: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class VoiceSettings:
    """Speech parameters applied when a unit is spoken.

    Attributes:
        rate: Speaking rate multiplier, must be positive.
        pitch: Pitch multiplier, must be positive.
        voice: Optional selected voice handle.
    """

    rate: float = 1.0
    pitch: float = 1.0
    voice: Voice | None = None

    def __post_init__(self) -> None:
        """Reject non-positive multipliers."""

        if self.rate <= 0:
            raise ValueError("`rate` must be a positive number.")
        if self.pitch <= 0:
            raise ValueError("`pitch` must be a positive number.")
