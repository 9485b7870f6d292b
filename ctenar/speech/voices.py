"""Voice selection helpers.

Responsibilities:
- Match user voice queries against engine-reported voices.
- Prefer a Czech voice when no explicit voice is requested.
"""

from __future__ import annotations

from ..models.datatypes import Voice


def find_voice(voices: list[Voice], query: str) -> Voice | None:
    """Return the first voice whose id or name contains `query`, case-insensitively."""

    needle = query.strip().lower()
    if not needle:
        return None
    for voice in voices:
        if voice.id.lower() == needle or voice.name.lower() == needle:
            return voice
    for voice in voices:
        if needle in voice.id.lower() or needle in voice.name.lower():
            return voice
    return None


def preferred_voice(voices: list[Voice], language: str = "cs") -> Voice | None:
    """Return the first voice advertising `language`, or `None`."""

    prefix = language.lower()
    for voice in voices:
        if any(item.lower().startswith(prefix) for item in voice.languages):
            return voice
    return None
