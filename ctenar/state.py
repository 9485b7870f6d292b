"""Explicit reader state container.

Responsibilities:
- Hold source text, reading mode, and voice settings as one immutable value.
- Expose segments and reading units as views recomputed from the source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .models.datatypes import ReadingMode, ReadingUnit, TextSegment, VoiceSettings
from .text.sample import SAMPLE_TEXT
from .text.segmenter import reading_units, segment
from .text.syllables import DEFAULT_POLICY, Syllabifier, SyllabificationPolicy


@dataclass(frozen=True, slots=True)
class ReaderState:
    """Reader state passed between the CLI, the session, and renderers.

    Attributes:
        text: Source text being practiced.
        mode: Active reading granularity.
        voice: Speech parameters for spoken units.
        policy: Syllabification policy applied to the text.
    """

    text: str = SAMPLE_TEXT
    mode: ReadingMode = ReadingMode.SYLLABLES
    voice: VoiceSettings = field(default_factory=VoiceSettings)
    policy: SyllabificationPolicy = DEFAULT_POLICY

    @property
    def segments(self) -> list[TextSegment]:
        """Return segments derived from the current text."""

        return segment(self.text, Syllabifier(self.policy))

    @property
    def units(self) -> list[ReadingUnit]:
        """Return reading units for the current text and mode."""

        return reading_units(self.segments, self.mode)

    def with_text(self, text: str) -> ReaderState:
        """Return a copy with different source text."""

        return replace(self, text=text)

    def with_mode(self, mode: ReadingMode | str) -> ReaderState:
        """Return a copy with a different reading mode."""

        return replace(self, mode=ReadingMode(mode))

    def with_voice(self, voice: VoiceSettings) -> ReaderState:
        """Return a copy with different voice settings."""

        return replace(self, voice=voice)
