"""
Letter encoding - scale words as strings.

The alphabet depends on how many distinct letters a word uses: "Ls" for
binary words, "Lms" for ternary words, and so on up to A-Z a-z. Strings of
decimal digits are read directly as letter indices.
"""

from __future__ import annotations

import string
from collections.abc import Sequence

from chuk_mcp_ternary.constants import STEP_LETTERS, ErrorMessages
from chuk_mcp_ternary.errors import InvalidInputError


def alphabet_for_arity(arity: int) -> str:
    """Letter table for words over `arity` letters."""
    return STEP_LETTERS[min(max(arity, 0), len(STEP_LETTERS) - 1)]


def _is_digit_word(text: str) -> bool:
    return all(c in string.digits for c in text)


def detect_alphabet(text: str) -> str | None:
    """
    The letter table a string is written in.

    Starts from the table for the number of distinct characters and widens
    until every character is found, so "LmLm" reads as ternary letters.
    Returns None for digit strings.

    Raises:
        InvalidInputError: If a character belongs to no table
    """
    if _is_digit_word(text):
        return None
    chars = set(text)
    for arity in range(min(len(chars), len(STEP_LETTERS) - 1), len(STEP_LETTERS)):
        table = alphabet_for_arity(arity)
        if chars <= set(table):
            return table
    largest = STEP_LETTERS[-1]
    unknown = next(c for c in text if c not in largest)
    raise InvalidInputError(ErrorMessages.UNKNOWN_LETTER.format(letter=unknown, word=text))


def parse_word(text: str) -> list[int]:
    """
    Parse a scale word.

    Example:
        parse_word("LmLsLmLsL") == [0, 1, 0, 2, 0, 1, 0, 2, 0]
        parse_word("010201020") == [0, 1, 0, 2, 0, 1, 0, 2, 0]
    """
    text = text.strip()
    if not text:
        return []
    alphabet = detect_alphabet(text)
    if alphabet is None:
        return [int(c) for c in text]
    return [alphabet.index(c) for c in text]


def format_word(word: Sequence[int], alphabet: str | None = None) -> str:
    """
    Write a scale word with letters.

    Uses the given alphabet, or the table sized for the largest letter.
    """
    if not word:
        return ""
    table = alphabet if alphabet is not None else alphabet_for_arity(max(word) + 1)
    if max(word) >= len(table) or min(word) < 0:
        raise InvalidInputError(
            ErrorMessages.UNKNOWN_LETTER.format(letter=max(word), word=list(word))
        )
    return "".join(table[letter] for letter in word)
