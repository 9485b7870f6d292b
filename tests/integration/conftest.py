"""Integration-test fixtures for deterministic speech behavior."""

from __future__ import annotations

import pytest

from ctenar.errors import SpeechUnavailableError


@pytest.fixture
def speech_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the CLI behave as if no speech engine is installed."""

    def _unavailable(*_: object, **__: object) -> None:
        """Raise the same error as a host without `pyttsx3`."""

        raise SpeechUnavailableError("Speech synthesis requires `pyttsx3`.")

    monkeypatch.setattr("ctenar.cli.create_synthesizer", _unavailable)


@pytest.fixture
def installed_synthesizer(monkeypatch: pytest.MonkeyPatch, fake_synthesizer):
    """Route CLI speech through the recording fake synthesizer."""

    monkeypatch.setattr("ctenar.cli.create_synthesizer", lambda *_, **__: fake_synthesizer)
    return fake_synthesizer
