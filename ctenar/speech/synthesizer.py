"""Speech synthesizer interfaces and system TTS implementation.

Responsibilities:
- Define the protocol the reading session uses to speak units.
- Provide a `pyttsx3`-backed synthesizer using platform voices.
- Report missing speech capability as `SpeechUnavailableError`.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Callable, Protocol

from ..errors import SpeechUnavailableError
from ..models.datatypes import Voice
from ..telemetry.logger import ReaderLogger


CompletionCallback = Callable[[], None]


class SpeechSynthesizer(Protocol):
    """Protocol for speech engines used by the reading session."""

    def speak(
        self,
        text: str,
        rate: float,
        pitch: float,
        voice: Voice | None,
        on_end: CompletionCallback | None = None,
    ) -> None:
        """Request one utterance and call `on_end` once it has been spoken."""

    def list_voices(self) -> list[Voice]:
        """Return voices available to the engine."""


class Pyttsx3Synthesizer:
    """Speak units with the platform speech engine through `pyttsx3`.

    Rate and pitch are multipliers over the engine's own defaults captured at
    construction. Pitch is skipped with a warning on drivers without support.
    """

    def __init__(self, engine: Any, logger: ReaderLogger | None = None) -> None:
        """Initialize from an already created `pyttsx3` engine."""

        self._engine = engine
        self._logger = logger
        self._pending: dict[str, CompletionCallback] = {}
        self._utterance_ids = count(1)
        self._base_rate = float(engine.getProperty("rate"))
        self._base_pitch = self._read_base_pitch()
        self._pitch_warning_emitted = False
        engine.connect("finished-utterance", self._on_finished_utterance)

    def speak(
        self,
        text: str,
        rate: float,
        pitch: float,
        voice: Voice | None,
        on_end: CompletionCallback | None = None,
    ) -> None:
        """Queue one utterance and run the engine loop until it is spoken."""

        self._engine.setProperty("rate", int(round(self._base_rate * rate)))
        self._apply_pitch(pitch)
        if voice is not None:
            self._engine.setProperty("voice", voice.id)

        name = f"utterance-{next(self._utterance_ids)}"
        if on_end is not None:
            self._pending[name] = on_end
        self._engine.say(text, name)
        self._engine.runAndWait()

    def list_voices(self) -> list[Voice]:
        """Return engine voices as read-only handles."""

        return [
            Voice(
                id=str(item.id),
                name=str(item.name or item.id),
                languages=tuple(_language_token(language) for language in item.languages or ()),
            )
            for item in self._engine.getProperty("voices")
        ]

    def _on_finished_utterance(self, name: str, completed: bool) -> None:
        """Fire the completion callback registered for one utterance."""

        _ = completed
        callback = self._pending.pop(name, None)
        if callback is not None:
            callback()

    def _read_base_pitch(self) -> float | None:
        """Return the driver's default pitch, or `None` when unsupported."""

        try:
            return float(self._engine.getProperty("pitch"))
        except KeyError:
            return None

    def _apply_pitch(self, pitch: float) -> None:
        """Set pitch relative to the driver default when the driver supports it."""

        if self._base_pitch is None:
            if pitch != 1.0 and not self._pitch_warning_emitted:
                self._pitch_warning_emitted = True
                if self._logger is not None:
                    self._logger.log_pitch_unsupported(type(self._engine).__module__)
            return
        self._engine.setProperty("pitch", self._base_pitch * pitch)


def _language_token(value: object) -> str:
    """Normalize driver language values, which some drivers report as bytes."""

    if isinstance(value, bytes):
        value = value.decode("utf-8", "ignore")
    return "".join(character for character in str(value) if character.isprintable()).strip()


def create_synthesizer(logger: ReaderLogger | None = None) -> Pyttsx3Synthesizer:
    """Create the system synthesizer or raise `SpeechUnavailableError`."""

    try:
        import pyttsx3
    except ImportError as exc:
        raise SpeechUnavailableError(
            "Speech synthesis requires `pyttsx3`; install `ctenar[speech]`."
        ) from exc

    try:
        engine = pyttsx3.init()
    except Exception as exc:
        raise SpeechUnavailableError(
            f"No speech engine is available on this system: {exc}"
        ) from exc
    return Pyttsx3Synthesizer(engine, logger=logger)
