"""Reading session coordinating highlighting and speech.

Responsibilities:
- Track the currently active reading unit.
- Speak activated units with the state's voice settings and clear the active
  unit from the speech completion callback.
- Report missing speech capability without affecting segmentation.
"""

from __future__ import annotations

from collections.abc import Callable

from .models.datatypes import ReadingUnit
from .speech.synthesizer import SpeechSynthesizer
from .state import ReaderState
from .telemetry.logger import ReaderLogger


class ReadingSession:
    """Activate reading units of a `ReaderState` and speak them when possible."""

    def __init__(
        self,
        state: ReaderState,
        synthesizer: SpeechSynthesizer | None = None,
        logger: ReaderLogger | None = None,
        unavailable_reason: str = "No speech synthesizer is configured.",
        on_unavailable: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize session state, optional synthesizer, and logger.

        `on_unavailable` replaces the logger warning when speech is missing, so
        the caller decides where the single report goes.
        """

        self.state = state
        self.synthesizer = synthesizer
        self.active_unit: ReadingUnit | None = None
        self._logger = logger
        self._unavailable_reason = unavailable_reason
        self._on_unavailable = on_unavailable
        self._unavailable_reported = False

    @property
    def speech_available(self) -> bool:
        """Return whether units can be spoken."""

        return self.synthesizer is not None

    def activate(self, unit: ReadingUnit) -> bool:
        """Mark `unit` active and speak it.

        Returns:
            `True` when an utterance was requested, `False` when speech is missing.
        """

        self.active_unit = unit
        if self.synthesizer is None:
            self._report_unavailable()
            return False

        if self._logger is not None:
            self._logger.log_speech_start(unit.kind.value, unit.sentence_index)
        settings = self.state.voice
        self.synthesizer.speak(
            unit.text,
            settings.rate,
            settings.pitch,
            settings.voice,
            on_end=lambda: self._on_speech_end(unit),
        )
        return True

    def read_all(self) -> list[ReadingUnit]:
        """Activate every unit of the current mode in reading order."""

        units = self.state.units
        for unit in units:
            self.activate(unit)
        return units

    def _on_speech_end(self, unit: ReadingUnit) -> None:
        """Clear highlighting for the unit whose utterance finished."""

        if self.active_unit == unit:
            self.active_unit = None
        if self._logger is not None:
            self._logger.log_speech_end(unit.kind.value, unit.sentence_index)

    def _report_unavailable(self) -> None:
        """Report the missing speech capability once per session."""

        if self._unavailable_reported:
            return
        self._unavailable_reported = True
        if self._on_unavailable is not None:
            self._on_unavailable(self._unavailable_reason)
        elif self._logger is not None:
            self._logger.log_speech_unavailable(self._unavailable_reason)
