"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
reading units, segment dumps, and voice listings.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import ReaderStageError
from .models.datatypes import ReadingUnit, TextSegment, Voice


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ReaderStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_speech_unavailable(reason: str) -> None:
    """Report missing speech synthesis as a non-fatal warning."""

    typer.secho(f"Speech unavailable: {reason}", fg=typer.colors.YELLOW, err=True)


def echo_syllabified_word(syllables: list[str], separator: str) -> None:
    """Print one word with syllables joined by `separator`."""

    typer.echo(separator.join(syllables))


def echo_units(units: list[ReadingUnit]) -> None:
    """Print reading units one per line."""

    for unit in units:
        typer.echo(unit.text)


def echo_segments_json(segments: list[TextSegment]) -> None:
    """Print segments as an indented UTF-8 JSON array."""

    payload = [
        {"text": item.text, "syllables": item.syllables, "type": item.kind.value}
        for item in segments
    ]
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def echo_voice_list(voices: list[Voice]) -> None:
    """Print compact voice rows sorted by name."""

    for voice in sorted(voices, key=lambda item: (item.name.lower(), item.id)):
        languages = ",".join(voice.languages) or "-"
        typer.echo(f"{voice.name} [{languages}] {voice.id}")
