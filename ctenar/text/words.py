"""Whitespace word tokenization."""

from __future__ import annotations


def split_words(sentence: str) -> list[str]:
    """Split a sentence on whitespace runs, keeping casing and attached punctuation."""

    return sentence.split()
