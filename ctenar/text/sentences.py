"""Sentence splitting for reading practice.

Responsibilities:
- Divide raw text into trimmed sentences.
- Keep terminal punctuation runs attached to the sentence they close.
"""

from __future__ import annotations

import re

_TERMINATOR_RE = re.compile(r"([.!?]+\s*)")


def split_sentences(text: str) -> list[str]:
    """Split text into trimmed sentences with their trailing punctuation.

    A run such as `?!` or `...` terminates one sentence and never starts a new
    empty one. Text without terminal punctuation yields a single sentence.
    Whitespace-only fragments are discarded.
    """

    fragments: list[str] = []
    for index, part in enumerate(_TERMINATOR_RE.split(text)):
        if not part:
            continue
        is_terminator = index % 2 == 1
        if is_terminator and fragments:
            fragments[-1] += part
        else:
            fragments.append(part)
    return [fragment.strip() for fragment in fragments if fragment.strip()]
