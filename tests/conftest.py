"""Shared pytest fixtures for the full Ctenar test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import pytest

from ctenar.models.datatypes import Voice


@dataclass
class SpokenUtterance:
    """One recorded speak request."""

    text: str
    rate: float
    pitch: float
    voice: Voice | None


@dataclass
class FakeSynthesizer:
    """In-memory synthesizer recording utterances instead of producing audio."""

    voices: list[Voice] = field(default_factory=list)
    auto_finish: bool = True
    spoken: list[SpokenUtterance] = field(default_factory=list)
    pending: list[Callable[[], None]] = field(default_factory=list)

    def speak(
        self,
        text: str,
        rate: float,
        pitch: float,
        voice: Voice | None,
        on_end: Callable[[], None] | None = None,
    ) -> None:
        """Record the utterance and finish it immediately when configured."""

        self.spoken.append(SpokenUtterance(text=text, rate=rate, pitch=pitch, voice=voice))
        if on_end is None:
            return
        if self.auto_finish:
            on_end()
        else:
            self.pending.append(on_end)

    def list_voices(self) -> list[Voice]:
        """Return configured fake voices."""

        return list(self.voices)

    def finish_all(self) -> None:
        """Fire completion callbacks held back while `auto_finish` is off."""

        while self.pending:
            self.pending.pop(0)()


@pytest.fixture
def czech_voice() -> Voice:
    """Provide a Czech voice handle."""

    return Voice(id="cs-zuzana", name="Zuzana", languages=("cs_CZ",))


@pytest.fixture
def fake_synthesizer(czech_voice: Voice) -> FakeSynthesizer:
    """Provide a recording synthesizer with one English and one Czech voice."""

    return FakeSynthesizer(
        voices=[Voice(id="en-alex", name="Alex", languages=("en_US",)), czech_voice]
    )


@pytest.fixture(autouse=True)
def _clear_ctenar_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `CTENAR_*` variables from leaking into config resolution."""

    for key in (
        "CTENAR_TEXT_FILE",
        "CTENAR_MODE",
        "CTENAR_RATE",
        "CTENAR_PITCH",
        "CTENAR_VOICE",
        "CTENAR_DIGRAPH_AWARE",
    ):
        monkeypatch.delenv(key, raising=False)
