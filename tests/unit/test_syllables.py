"""Unit tests for Czech syllabification rules and policy handling."""

from __future__ import annotations

import pytest

from ctenar.text.sample import SAMPLE_TEXT
from ctenar.text.syllables import (
    DEFAULT_POLICY,
    Syllabifier,
    SyllabificationPolicy,
    syllabify,
)


@pytest.mark.parametrize("word", ["", "a", "k", "?"])
def test_syllabify_returns_short_words_unchanged(word: str) -> None:
    """Words of length one or less should come back as the only syllable."""

    assert syllabify(word) == [word]


def test_syllabify_honors_special_case_table() -> None:
    """Table entries should be used verbatim for lowercase stems."""

    assert syllabify("krtka") == ["krt", "ka"]
    assert syllabify("mrkev") == ["mr", "kev"]
    assert syllabify("zahradníci") == ["za", "hrad", "ní", "ci"]


def test_syllabify_special_case_keeps_original_casing_and_punctuation() -> None:
    """Capitalized and punctuated table words should still round-trip exactly."""

    assert syllabify("Krtka?") == ["Krt", "ka?"]
    assert syllabify("MRKEV") == ["MR", "KEV"]
    assert syllabify("odlákat.") == ["od", "lá", "kat."]


def test_syllabify_special_case_table_is_not_mutated_by_punctuation() -> None:
    """Repeated lookups with punctuation must not leak into later results."""

    assert syllabify("krtka,") == ["krt", "ka,"]
    assert syllabify("krtka") == ["krt", "ka"]


def test_syllabify_single_consonant_moves_to_next_onset() -> None:
    """A lone consonant between nuclei should start the following syllable."""

    assert syllabify("domeček") == ["do", "me", "ček"]
    assert syllabify("Znáte") == ["Zná", "te"]
    assert syllabify("prohání") == ["pro", "há", "ní"]


def test_syllabify_splits_adjacent_vowels() -> None:
    """Adjacent nuclei should be split right after the first one."""

    assert syllabify("naučit") == ["na", "u", "čit"]


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("kabla", ["ka", "bla"]),
        ("citlivým", ["ci", "tli", "vým"]),
        ("patva", ["pa", "tva"]),
    ],
)
def test_syllabify_obstruent_with_sonant_or_v_joins_next_onset(
    word: str, expected: list[str]
) -> None:
    """Obstruent followed by a sonant or `v` should stay together in the onset."""

    assert syllabify(word) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("červy", ["čer", "vy"]),
        ("ponravy", ["pon", "ra", "vy"]),
        ("kapsa", ["kap", "sa"]),
        ("banka", ["ban", "ka"]),
    ],
)
def test_syllabify_other_two_consonant_clusters_split_between(
    word: str, expected: list[str]
) -> None:
    """Remaining two-consonant clusters should leave one consonant behind."""

    assert syllabify(word) == expected


def test_syllabify_three_consonants_keep_first_with_previous_syllable() -> None:
    """Clusters of three or more should split after their first consonant."""

    assert syllabify("sestra") == ["ses", "tra"]


def test_syllabify_treats_r_and_l_between_consonants_as_nuclei() -> None:
    """Syllabic `r`/`l` should count as nuclei only between non-vowels."""

    assert syllabify("Krtek") == ["Kr", "tek"]
    assert syllabify("Brno") == ["Br", "no"]
    assert syllabify("prst") == ["prst"]
    assert syllabify("hledá") == ["hle", "dá"]


def test_syllabify_keeps_monosyllables_with_punctuation_whole() -> None:
    """Single-nucleus words should be returned whole, punctuation included."""

    assert syllabify("Jde") == ["Jde"]
    assert syllabify("pes.") == ["pes."]
    assert syllabify("?!") == ["?!"]


def test_syllabify_reattaches_trailing_punctuation_to_last_syllable() -> None:
    """Stripped punctuation runs should return on the final syllable."""

    assert syllabify("zdaleka,") == ["zda", "le", "ka,"]
    assert syllabify("domeček?!") == ["do", "me", "ček?!"]


def test_syllabify_round_trips_every_word_of_sample_text() -> None:
    """Concatenated syllables should reproduce every word exactly."""

    for word in SAMPLE_TEXT.split():
        syllables = syllabify(word)
        assert syllables
        assert "".join(syllables) == word


@pytest.mark.parametrize(
    "word",
    [
        "...",
        "?!;",
        "KrTeK",
        "ŽLUŤOUČKÝ",
        "Müller",
        "über",
        "ping-pong",
        "rock'n'roll",
        "d'Artagnan",
        "x",
        "1234",
        "krtka...",
    ],
)
def test_syllabify_round_trips_awkward_words(word: str) -> None:
    """Punctuation-only, mixed-case, foreign, and hyphenated words should round-trip."""

    syllables = syllabify(word)

    assert syllables
    assert "".join(syllables) == word


@pytest.mark.parametrize("word", ["duchem", "Chrochtal", "chlapec", "CHOCHOL?", "ch"])
def test_digraph_policy_round_trips_words_with_ch(word: str) -> None:
    """Counting `ch` as one consonant must not drop or duplicate letters."""

    syllables = Syllabifier(DEFAULT_POLICY.extended(digraphs=("ch",))).syllabify(word)

    assert syllables
    assert "".join(syllables) == word


def test_custom_cluster_exception_splits_after_nucleus() -> None:
    """Extra cluster exceptions should move the whole cluster to the next onset."""

    syllabifier = Syllabifier(DEFAULT_POLICY.extended(cluster_exceptions=["nk"]))

    assert syllabifier.syllabify("banka") == ["ba", "nka"]


def test_digraph_policy_counts_ch_as_one_consonant() -> None:
    """Digraph-aware policy should keep `ch` together in the next onset."""

    assert syllabify("duchem") == ["duc", "hem"]
    digraph_aware = Syllabifier(DEFAULT_POLICY.extended(digraphs=("ch",)))
    assert digraph_aware.syllabify("duchem") == ["du", "chem"]


def test_extended_policy_adds_special_cases_without_touching_default() -> None:
    """Extending a policy should return a new policy and leave the default intact."""

    policy = DEFAULT_POLICY.extended(special_cases={"Jablko": ["jab", "lko"]})

    assert Syllabifier(policy).syllabify("Jablko") == ["Jab", "lko"]
    assert "jablko" not in DEFAULT_POLICY.special_cases


def test_policy_rejects_special_case_that_does_not_join_back() -> None:
    """Special cases must concatenate back to their key."""

    with pytest.raises(ValueError, match=r"Special case `kolo`"):
        SyllabificationPolicy(special_cases={"kolo": ("ko", "lu")})


def test_policy_rejects_special_case_key_with_trailing_punctuation() -> None:
    """Keys are matched after punctuation is stripped, so punctuated keys are refused."""

    with pytest.raises(ValueError, match=r"`krtka\.` must not end with punctuation"):
        SyllabificationPolicy(special_cases={"krtka.": ("krt", "ka.")})
    with pytest.raises(ValueError, match="must not end with punctuation"):
        DEFAULT_POLICY.extended(special_cases={"Jablko!": ["jab", "lko!"]})
