"""Command-line interface for Ctenar.

Responsibilities:
- Expose user-facing commands for syllabification, segmentation, and reading.
- Convert CLI arguments and config sources into a `ReaderState`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_segments_json,
    echo_speech_unavailable,
    echo_syllabified_word,
    echo_units,
    echo_voice_list,
    exit_with_command_error,
)
from .config import ConfigLoader, ReaderConfig
from .errors import ReaderStageError, SpeechUnavailableError
from .models.datatypes import ReadingMode, Voice
from .session import ReadingSession
from .speech.synthesizer import SpeechSynthesizer, create_synthesizer
from .speech.voices import find_voice, preferred_voice
from .state import ReaderState
from .telemetry.logger import ReaderLogger
from .text.sample import SAMPLE_TEXT
from .text.syllables import Syllabifier

app = typer.Typer(
    name="ctenar",
    no_args_is_help=True,
    help="Czech reading practice: split text into syllables, words, or sentences.",
)

TextArgument = Annotated[
    str | None,
    typer.Argument(help="Text to segment. Defaults to `--file` or the built-in passage."),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="UTF-8 text file to segment."),
]
ModeOption = Annotated[
    ReadingMode | None,
    typer.Option("--mode", "-m", help="Reading granularity (overrides config)."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with reader defaults."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit stage events on stderr."),
]


def _load_base_config(config_path: Path | None) -> ReaderConfig:
    """Load YAML config when requested, environment config otherwise."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise ReaderStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `CTENAR_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ReaderStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ReaderStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise ReaderStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_source_text(text: str | None, text_file: Path | None) -> str:
    """Return text from the argument, the file, or the built-in passage."""

    if text is not None:
        return text
    if text_file is None:
        return SAMPLE_TEXT
    try:
        return text_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReaderStageError(
            stage="input",
            detail=f"Failed to read text file `{text_file}`: {exc}",
            hint="Pass an existing UTF-8 file via `--file`.",
        ) from exc


def _build_state(
    config: ReaderConfig,
    text: str | None,
    text_file: Path | None,
    mode: ReadingMode | None,
) -> ReaderState:
    """Create reader state with CLI overrides applied over config values."""

    source = _resolve_source_text(text, text_file if text_file is not None else config.text_file)
    return ReaderState(
        text=source,
        mode=mode if mode is not None else config.mode,
        voice=config.voice_settings(),
        policy=config.syllabification_policy(),
    )


def _resolve_voice(synthesizer: SpeechSynthesizer, query: str | None) -> Voice | None:
    """Resolve the requested voice, or prefer a Czech voice when none is requested."""

    voices = synthesizer.list_voices()
    if query is None:
        return preferred_voice(voices, "cs")
    voice = find_voice(voices, query)
    if voice is None:
        raise ReaderStageError(
            stage="voice",
            detail=f"Voice `{query}` is not available.",
            hint="Run `ctenar voices` to list installed voices.",
        )
    return voice


@app.command("syllabify")
def syllabify_command(
    words: Annotated[list[str], typer.Argument(help="Words to split into syllables.")],
    separator: Annotated[
        str, typer.Option("--separator", "-s", help="Separator printed between syllables.")
    ] = "-",
    digraphs: Annotated[
        bool, typer.Option("--digraphs", help="Treat `ch` as one consonant in clusters.")
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Print each word split into syllables."""

    try:
        policy = _load_base_config(config_file).syllabification_policy()
        if digraphs:
            policy = policy.extended(digraphs=("ch",))
    except Exception as exc:
        exit_with_command_error("syllabify", exc)

    syllabifier = Syllabifier(policy)
    for word in words:
        echo_syllabified_word(syllabifier.syllabify(word), separator)


@app.command("segment")
def segment_command(
    text: TextArgument = None,
    text_file: FileOption = None,
    mode: ModeOption = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print sentence segments as JSON.")
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print reading units for the selected mode, or all segments as JSON."""

    try:
        logger = ReaderLogger(level="DEBUG" if verbose else "WARNING")
        state = _build_state(_load_base_config(config_file), text, text_file, mode)
        segments = state.segments
        units = state.units
        logger.log_segmented(len(segments), len(units), state.mode.value)
    except Exception as exc:
        exit_with_command_error("segment", exc)

    if as_json:
        echo_segments_json(segments)
    else:
        echo_units(units)


@app.command("read")
def read_command(
    text: TextArgument = None,
    text_file: FileOption = None,
    mode: ModeOption = None,
    rate: Annotated[
        float | None, typer.Option("--rate", min=0.1, help="Speaking rate multiplier.")
    ] = None,
    pitch: Annotated[
        float | None, typer.Option("--pitch", min=0.1, help="Pitch multiplier.")
    ] = None,
    voice: Annotated[
        str | None, typer.Option("--voice", help="Voice id or name fragment.")
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print and speak each unit; missing speech is reported but not fatal."""

    try:
        logger = ReaderLogger(level="DEBUG" if verbose else "WARNING")
        config = _load_base_config(config_file)
        if rate is not None:
            config.rate = rate
        if pitch is not None:
            config.pitch = pitch
        if voice is not None:
            config.voice = voice
        state = _build_state(config, text, text_file, mode)

        synthesizer: SpeechSynthesizer | None
        unavailable_reason = "No speech synthesizer is configured."
        try:
            synthesizer = create_synthesizer(logger)
        except SpeechUnavailableError as exc:
            synthesizer = None
            unavailable_reason = exc.reason

        if synthesizer is not None:
            state = state.with_voice(
                config.voice_settings(_resolve_voice(synthesizer, config.voice))
            )
        session = ReadingSession(
            state,
            synthesizer=synthesizer,
            logger=logger,
            unavailable_reason=unavailable_reason,
            on_unavailable=echo_speech_unavailable,
        )
        units = state.units
        logger.log_segmented(len(state.segments), len(units), state.mode.value)
        for unit in units:
            typer.echo(unit.text)
            session.activate(unit)
    except Exception as exc:
        exit_with_command_error("read", exc)


@app.command("voices")
def voices_command() -> None:
    """List speech-synthesis voices installed on this system."""

    try:
        synthesizer = create_synthesizer()
        voices = synthesizer.list_voices()
    except SpeechUnavailableError as exc:
        exit_with_command_error(
            "voices",
            ReaderStageError(
                stage="speech",
                detail=exc.reason,
                hint="Install a system speech engine and `ctenar[speech]`.",
            ),
        )
    except Exception as exc:
        exit_with_command_error("voices", exc)

    echo_voice_list(voices)


def main() -> None:
    """Run the Ctenar Typer application."""

    app()
