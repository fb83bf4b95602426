"""Shared helpers for word normalization."""

from __future__ import annotations

import unicodedata

from ..core.constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with every non-letter removed.

    Accented letters (Å, Ä, Ö, É, ...) are kept as they are; text is
    NFC-composed first so a letter and its combining accent stay one cell.
    """

    if not text:
        return ""
    composed = unicodedata.normalize("NFC", text)
    return "".join(char for char in composed if char.isalpha()).upper()


def is_playable_word(
    word: str, min_length: int = MIN_WORD_LENGTH, max_length: int = MAX_WORD_LENGTH
) -> bool:
    """True when ``word`` is already clean and within the length limits."""

    return bool(word) and word == clean_word(word) and min_length <= len(word) <= max_length


__all__ = ["clean_word", "is_playable_word"]
