"""
Lightweight guess validation.

This module answers the question: "May the user enter this word as a guess?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exactly WORD_LENGTH letters
  - it exists in the provided `allowed` collection

Feedback text is validated by `feedback.parse_feedback`, which raises instead
of returning a flag because the parsed pattern is what the caller wants.
"""

from typing import Collection

from .feedback import WORD_LENGTH


def normalize_word(word: str) -> str:
    return word.strip().lower()


def validate_guess(word: str, allowed: Collection[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` should already be lowercase. Pass a set when calling this
        in a loop; a list works but costs a linear scan per call.
    """
    if not isinstance(word, str):
        return False

    w = normalize_word(word)

    # Shape/characters check
    if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha()):
        return False

    return w in allowed
