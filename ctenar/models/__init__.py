"""Shared typed data models for Ctenar.

This package contains dataclasses and enumerations used across modules to
avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    ReadingMode,
    ReadingUnit,
    TextSegment,
    UnitKind,
    Voice,
    VoiceSettings,
)

__all__ = [
    "ReadingMode",
    "ReadingUnit",
    "TextSegment",
    "UnitKind",
    "Voice",
    "VoiceSettings",
]
