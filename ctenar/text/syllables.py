"""Rule-based Czech syllabification.

Responsibilities:
- Split one word token into syllables whose concatenation equals the token.
- Keep rule constants in an explicit immutable policy so exceptions can be
  adjusted without touching the rule engine.

Key types:
- `SyllabificationPolicy`: vowels, consonant classes, special cases, and
  cluster exceptions used by the engine.
- `Syllabifier`: dispatches between the special-case table and the rule engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

_DEFAULT_VOWELS = frozenset("aáeéěiíoóuúůyý")
_DEFAULT_SYLLABIC_CONSONANTS = frozenset("rl")
_DEFAULT_OBSTRUENTS = frozenset(
    {"p", "b", "t", "d", "ť", "ď", "k", "g", "f", "v", "s", "z", "š", "ž", "ch", "h", "c", "č"}
)
_DEFAULT_PUNCTUATION = ".,!?;:"
_DEFAULT_SPECIAL_CASES: dict[str, tuple[str, ...]] = {
    "krtka": ("krt", "ka"),
    "jemnou": ("jem", "nou"),
    "mnoho": ("mno", "ho"),
    "černou": ("čer", "nou"),
    "dohlédne": ("do", "hléd", "ne"),
    "mlsá": ("ml", "sá"),
    "zahradní": ("za", "hrad", "ní"),
    "zahradníci": ("za", "hrad", "ní", "ci"),
    "zahrady": ("za", "hra", "dy"),
    "mrkev": ("mr", "kev"),
    "rostlinám": ("rost", "li", "nám"),
    "odlákat": ("od", "lá", "kat"),
}
_DEFAULT_CLUSTER_EXCEPTIONS = frozenset({"ďm", "bv"})


@dataclass(frozen=True, slots=True)
class SyllabificationPolicy:
    """Immutable constants driving syllable boundary placement.

    Attributes:
        vowels: Lowercase characters that always form a syllable nucleus.
        syllabic_consonants: Consonants that form a nucleus between non-vowels.
        obstruents: Lowercase obstruent consonants (single characters or digraphs).
        punctuation: Characters stripped from the end of a word before analysis.
        special_cases: Lowercase stem to predetermined syllables.
        cluster_exceptions: Two-consonant clusters split right after the nucleus.
        digraphs: Consonant digraphs counted as one consonant inside clusters.
    """

    vowels: frozenset[str] = _DEFAULT_VOWELS
    syllabic_consonants: frozenset[str] = _DEFAULT_SYLLABIC_CONSONANTS
    obstruents: frozenset[str] = _DEFAULT_OBSTRUENTS
    punctuation: str = _DEFAULT_PUNCTUATION
    special_cases: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(_DEFAULT_SPECIAL_CASES)
    )
    cluster_exceptions: frozenset[str] = _DEFAULT_CLUSTER_EXCEPTIONS
    digraphs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate that every special case is a bare stem that joins back to its key."""

        for word, syllables in self.special_cases.items():
            if word != word.rstrip(self.punctuation):
                raise ValueError(
                    f"Special case `{word}` must not end with punctuation; "
                    "punctuation is stripped before lookup."
                )
            if not syllables or "".join(syllables) != word:
                raise ValueError(
                    f"Special case `{word}` must split into syllables that join back to it."
                )

    def extended(
        self,
        special_cases: Mapping[str, Iterable[str]] | None = None,
        cluster_exceptions: Iterable[str] = (),
        digraphs: Iterable[str] | None = None,
    ) -> SyllabificationPolicy:
        """Return a copy with extra special cases and cluster exceptions merged in."""

        merged_cases = dict(self.special_cases)
        for word, syllables in (special_cases or {}).items():
            merged_cases[word.lower()] = tuple(syllable.lower() for syllable in syllables)
        return replace(
            self,
            special_cases=merged_cases,
            cluster_exceptions=self.cluster_exceptions.union(
                cluster.lower() for cluster in cluster_exceptions
            ),
            digraphs=self.digraphs if digraphs is None else tuple(digraphs),
        )


DEFAULT_POLICY = SyllabificationPolicy()


class Syllabifier:
    """Split Czech words into syllables using a lookup table and a rule engine."""

    def __init__(self, policy: SyllabificationPolicy | None = None) -> None:
        """Initialize with a custom policy or the default Czech rule set."""

        self.policy = policy or DEFAULT_POLICY

    def syllabify(self, word: str) -> list[str]:
        """Return ordered syllables of `word`; concatenating them yields `word`.

        Trailing punctuation is kept on the final syllable. Words without a
        detectable nucleus, or with only one, are returned as a single syllable.
        """

        if len(word) <= 1:
            return [word]

        stem = word.rstrip(self.policy.punctuation)
        punctuation = word[len(stem):]

        special = self.policy.special_cases.get(stem.lower())
        if special is not None:
            syllables = self._slice_special_case(stem, special)
        else:
            syllables = self._apply_rules(stem)
            if syllables is None:
                return [word]

        syllables[-1] += punctuation
        return syllables

    def _slice_special_case(self, stem: str, stored: tuple[str, ...]) -> list[str]:
        """Cut the original stem at the stored syllable lengths, keeping its casing."""

        syllables: list[str] = []
        start = 0
        for syllable in stored[:-1]:
            end = start + len(syllable)
            syllables.append(stem[start:end])
            start = end
        syllables.append(stem[start:])
        return syllables

    def _apply_rules(self, stem: str) -> list[str] | None:
        """Split a punctuation-free stem by nucleus positions, or `None` if monosyllabic."""

        nuclei = self._find_nuclei(stem)
        if len(nuclei) <= 1:
            return None

        syllables: list[str] = []
        start = 0
        for current, following in zip(nuclei, nuclei[1:]):
            split = self._split_position(stem, current, following)
            syllables.append(stem[start:split])
            start = split
        syllables.append(stem[start:])
        return syllables

    def _find_nuclei(self, stem: str) -> list[int]:
        """Return positions of vowels and syllabic consonants acting as vowels."""

        lowered = stem.lower()
        nuclei: list[int] = []
        for index, character in enumerate(lowered):
            if character in self.policy.vowels:
                nuclei.append(index)
                continue
            if character not in self.policy.syllabic_consonants:
                continue
            previous_is_vowel = index > 0 and lowered[index - 1] in self.policy.vowels
            next_is_vowel = (
                index < len(lowered) - 1 and lowered[index + 1] in self.policy.vowels
            )
            if not previous_is_vowel and not next_is_vowel:
                nuclei.append(index)
        return nuclei

    def _split_position(self, stem: str, current: int, following: int) -> int:
        """Place the boundary between two adjacent nuclei."""

        consonants = self._consonant_units(stem[current + 1:following].lower())
        after_nucleus = current + 1

        if len(consonants) <= 1:
            return after_nucleus

        first_width = after_nucleus + len(consonants[0])
        if len(consonants) >= 3:
            return first_width

        first, second = consonants
        if self._is_obstruent(first) and (self._is_sonant(second) or second == "v"):
            return after_nucleus
        if first + second in self.policy.cluster_exceptions:
            return after_nucleus
        return first_width

    def _consonant_units(self, cluster: str) -> list[str]:
        """Split an inter-nucleus cluster into consonants, honoring digraphs."""

        units: list[str] = []
        index = 0
        while index < len(cluster):
            digraph = next(
                (item for item in self.policy.digraphs if cluster.startswith(item, index)),
                None,
            )
            unit = digraph or cluster[index]
            units.append(unit)
            index += len(unit)
        return units

    def _is_obstruent(self, consonant: str) -> bool:
        return consonant in self.policy.obstruents

    def _is_sonant(self, consonant: str) -> bool:
        return not self._is_obstruent(consonant) and consonant not in self.policy.vowels


_DEFAULT_SYLLABIFIER = Syllabifier()


def syllabify(word: str) -> list[str]:
    """Split one word token into syllables with the default Czech policy."""

    return _DEFAULT_SYLLABIFIER.syllabify(word)
