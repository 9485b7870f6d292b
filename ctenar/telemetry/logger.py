"""Structured reader event logging.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
- Keep context values shell-safe and ordered for reproducible output.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class ReaderLogger:
    """Emit deterministic stage events for segmentation and speech activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[reader] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_segmented(self, sentences: int, units: int, mode: str) -> None:
        """Emit a segmentation-complete event with result counts."""

        self._emit("INFO", "complete", "segment", sentences=sentences, units=units, mode=mode)

    def log_speech_start(self, kind: str, sentence_index: int) -> None:
        """Emit an utterance request event."""

        self._emit("DEBUG", "start", "speech", kind=kind, sentence=sentence_index)

    def log_speech_end(self, kind: str, sentence_index: int) -> None:
        """Emit an utterance completion event."""

        self._emit("DEBUG", "end", "speech", kind=kind, sentence=sentence_index)

    def log_speech_unavailable(self, reason: str) -> None:
        """Emit a non-fatal warning that speech synthesis is missing."""

        self._emit("WARNING", "unavailable", "speech", reason=reason)

    def log_pitch_unsupported(self, driver: str) -> None:
        """Emit a warning that the active speech driver ignores pitch."""

        self._emit("WARNING", "pitch_unsupported", "speech", driver=driver)
