"""Configuration model and loaders for Ctenar.

Responsibilities:
- Define reader configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Derive voice settings and syllabification policy from configured values.

Key types:
- `ReaderConfig`: normalized settings for one reading run.
- `ConfigLoader`: static construction helpers for `ReaderConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import ReadingMode, Voice, VoiceSettings
from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_float,
)
from .text.syllables import DEFAULT_POLICY, SyllabificationPolicy

_DIGRAPHS = ("ch",)
_SUPPORTED_MODES = ", ".join(mode.value for mode in ReadingMode)


@dataclass(slots=True)
class ReaderConfig:
    """Settings for one reading run.

    Attributes:
        text_file: Optional UTF-8 file holding the source text.
        mode: Reading granularity.
        rate: Speaking rate multiplier.
        pitch: Pitch multiplier.
        voice: Optional voice id or name fragment.
        digraph_aware: Whether `ch` counts as one consonant in clusters.
        special_cases: Extra lowercase words with predetermined syllables.
        cluster_exceptions: Extra two-consonant clusters split after the nucleus.
    """

    text_file: Path | None = None
    mode: ReadingMode = ReadingMode.SYLLABLES
    rate: float = 1.0
    pitch: float = 1.0
    voice: str | None = None
    digraph_aware: bool = False
    special_cases: dict[str, tuple[str, ...]] = field(default_factory=dict)
    cluster_exceptions: tuple[str, ...] = ()

    def validate(self) -> None:
        """Validate configuration values before a run."""

        if self.rate <= 0:
            raise ValueError("`rate` must be a positive number.")
        if self.pitch <= 0:
            raise ValueError("`pitch` must be a positive number.")
        for cluster in self.cluster_exceptions:
            if len(cluster) != 2:
                raise ValueError(
                    f"`cluster_exceptions` entry `{cluster}` must be exactly two consonants."
                )
        self.syllabification_policy()

    def voice_settings(self, voice: Voice | None = None) -> VoiceSettings:
        """Return speech settings with an optionally resolved voice handle."""

        return VoiceSettings(rate=self.rate, pitch=self.pitch, voice=voice)

    def syllabification_policy(self) -> SyllabificationPolicy:
        """Return the default policy extended with configured exceptions."""

        return DEFAULT_POLICY.extended(
            special_cases=self.special_cases,
            cluster_exceptions=self.cluster_exceptions,
            digraphs=_DIGRAPHS if self.digraph_aware else (),
        )


class ConfigLoader:
    """Factory methods for creating `ReaderConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "text_file",
            "mode",
            "rate",
            "pitch",
            "voice",
            "digraph_aware",
            "special_cases",
            "cluster_exceptions",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> ReaderConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ReaderConfig:
        """Create a validated config from `CTENAR_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key in ("text_file", "mode", "rate", "pitch", "voice", "digraph_aware"):
            value = normalize_optional_string(env_map.get(f"CTENAR_{key.upper()}"))
            if value is not None:
                payload[key] = value
        return ConfigLoader._build_config_from_mapping(payload, source_label="Environment")

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> ReaderConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        text_file = normalize_optional_string(payload.get("text_file"))
        config = ReaderConfig(
            text_file=Path(text_file) if text_file is not None else None,
            mode=ConfigLoader._optional_mode(payload, source_label),
            rate=ConfigLoader._optional_positive_float(payload, "rate", source_label),
            pitch=ConfigLoader._optional_positive_float(payload, "pitch", source_label),
            voice=normalize_optional_string(payload.get("voice")),
            digraph_aware=ConfigLoader._optional_boolean(payload, "digraph_aware", source_label),
            special_cases=ConfigLoader._optional_special_cases(payload, source_label),
            cluster_exceptions=ConfigLoader._optional_clusters(payload, source_label),
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _optional_mode(payload: Mapping[str, Any], source_label: str) -> ReadingMode:
        """Read the reading mode, defaulting to syllables."""

        value = normalize_optional_string(payload.get("mode"))
        if value is None:
            return ReadingMode.SYLLABLES
        try:
            return ReadingMode(value.lower())
        except ValueError as exc:
            raise ValueError(
                f"{source_label} field `mode` must be one of: {_SUPPORTED_MODES}."
            ) from exc

    @staticmethod
    def _optional_positive_float(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> float:
        """Read a positive multiplier, defaulting to 1.0."""

        if normalize_optional_string(payload.get(key)) is None:
            return 1.0
        try:
            return parse_positive_float(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_boolean(payload: Mapping[str, Any], key: str, source_label: str) -> bool:
        """Read and validate a boolean field, defaulting to `False`."""

        if key not in payload:
            return False
        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_special_cases(
        payload: Mapping[str, Any], source_label: str
    ) -> dict[str, tuple[str, ...]]:
        """Read extra special cases given as syllable lists or hyphenated strings."""

        raw = payload.get("special_cases")
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `special_cases` must be a mapping/object.")

        normalized: dict[str, tuple[str, ...]] = {}
        for raw_word, raw_syllables in raw.items():
            word = normalize_optional_string(raw_word)
            if word is None:
                raise ValueError(f"{source_label} field `special_cases` contains a blank key.")
            if isinstance(raw_syllables, str):
                parts = raw_syllables.split("-")
            elif isinstance(raw_syllables, list):
                parts = [str(item) for item in raw_syllables]
            else:
                raise ValueError(
                    f"{source_label} field `special_cases` entry `{word}` must be a list "
                    "or a hyphenated string."
                )
            syllables = tuple(part.strip() for part in parts if part.strip())
            if "".join(syllables).lower() != word.lower():
                raise ValueError(
                    f"{source_label} field `special_cases` entry `{word}` must join back "
                    "to the word."
                )
            normalized[word.lower()] = syllables
        return normalized

    @staticmethod
    def _optional_clusters(payload: Mapping[str, Any], source_label: str) -> tuple[str, ...]:
        """Read extra cluster exceptions as a list of two-letter strings."""

        raw = payload.get("cluster_exceptions")
        if raw is None:
            return ()
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `cluster_exceptions` must be a list.")
        clusters: list[str] = []
        for item in raw:
            cluster = normalize_optional_string(item)
            if cluster is None:
                raise ValueError(
                    f"{source_label} field `cluster_exceptions` contains a blank entry."
                )
            clusters.append(cluster.lower())
        return tuple(clusters)
