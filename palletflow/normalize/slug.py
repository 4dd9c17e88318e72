"""
Header slugs.

Column headers on the listing page are free text ("Height (in)",
"Pallet #").  `slugify` turns them into stable ASCII keys so extracted
rows can be addressed as `row["height-in"]`.  Accents are folded with a
fixed positional table rather than Unicode normalization so that the
listed punctuation marks become hyphens.
"""

from __future__ import annotations

import re

# Positional fold table: _FOLD_FROM[i] becomes _FOLD_TO[i].
_FOLD_FROM = "àáäâèéëêìíïîòóöôùúüûñç·/_,:;"
_FOLD_TO = "aaaaeeeeiiiioooouuuunc------"
_FOLD_TABLE = str.maketrans(_FOLD_FROM, _FOLD_TO)

_INVALID_CHARS = re.compile(r"[^a-z0-9 -]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def slugify(text: str) -> str:
    """Convert header text into a lowercase hyphenated key.

    Leading and trailing hyphens are kept, so a label made only of
    punctuation can still produce "-".  Applying the function to its own
    output returns the same string.
    """
    text = text.strip().lower()
    text = text.translate(_FOLD_TABLE)
    text = _INVALID_CHARS.sub("", text)
    text = _WHITESPACE.sub("-", text)
    return _DASHES.sub("-", text)
