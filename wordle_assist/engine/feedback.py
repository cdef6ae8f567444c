"""
Feedback model for a single (guess, answer) pair.

Conventions (driver text codec):
  - 'g'           : correct letter in the correct position
  - 'y'           : letter occurs elsewhere in the answer
  - 'x' / '-' / '.' : letter does not occur in the answer

The per-position rule is a plain membership test:
  CORRECT if guess[i] == answer[i], else PRESENT if guess[i] occurs anywhere
  in the answer, else ABSENT.

Repeated letters are NOT capped by their multiplicity in the answer: a guess
with two 'e's against an answer with one 'e' can show two yellows. The
constraint state and the scoring engine are built around this exact rule.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

WORD_LENGTH = 5


class Outcome(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


# Ordered, hashable: usable directly as a dict key when grouping answers.
Pattern = Tuple[Outcome, ...]

ALL_CORRECT: Pattern = (Outcome.CORRECT,) * WORD_LENGTH

_SYMBOLS = {
    "x": Outcome.ABSENT,
    "-": Outcome.ABSENT,
    ".": Outcome.ABSENT,
    "y": Outcome.PRESENT,
    "g": Outcome.CORRECT,
}
_LETTERS = {Outcome.ABSENT: "x", Outcome.PRESENT: "y", Outcome.CORRECT: "g"}


class FeedbackError(ValueError):
    """Raised when feedback text cannot be mapped onto five outcomes."""


def score_guess(guess: str, answer: str) -> Pattern:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Examples:
      score_guess("apple", "angle") -> (CORRECT, ABSENT, ABSENT, CORRECT, CORRECT)
      score_guess("geese", "those") -> (ABSENT, PRESENT, PRESENT, CORRECT, CORRECT)
    """
    return tuple(
        Outcome.CORRECT if g == a
        else Outcome.PRESENT if g in answer
        else Outcome.ABSENT
        for g, a in zip(guess, answer)
    )


def parse_feedback(text: str) -> Pattern:
    """
    Parse driver feedback such as "xygxx" into a Pattern.

    Raises FeedbackError on wrong length or an unrecognized symbol.
    """
    s = text.strip().lower()
    if len(s) != WORD_LENGTH:
        raise FeedbackError(f"feedback must have {WORD_LENGTH} symbols; got {len(s)}")
    try:
        return tuple(_SYMBOLS[ch] for ch in s)
    except KeyError as e:
        raise FeedbackError(f"unknown feedback symbol {e.args[0]!r} (use x, y or g)") from e


def format_pattern(pattern: Pattern) -> str:
    """Pattern -> compact text, e.g. (CORRECT, ABSENT, ...) -> "gx..."."""
    return "".join(_LETTERS[o] for o in pattern)
