"""
One interactive solving session.

Holds the static guessable list plus the CURRENT constraint state and
candidate pool. Each round the driver asks for a report (`suggest`), the user
plays a word, and the driver hands back the word and its feedback (`record`).
The state object is replaced, never mutated, on every record.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from wordle_assist.engine import ConstraintState, Pattern, apply_feedback, filter_candidates
from wordle_assist.engine.feedback import format_pattern
from wordle_assist.engine.validation import normalize_word
from wordle_assist.ranking import DIRECT_GUESS_LIMIT, TOP_N, RoundReport, rank_round

log = logging.getLogger(__name__)


class UnknownWordError(ValueError):
    """Raised when a recorded guess is not in the guessable list."""


class Session:
    def __init__(self, guessable: Sequence[str], *, workers: int | None = None,
                 top_n: int = TOP_N, executor: str = "thread"):
        self.guessable: List[str] = list(guessable)
        self._allowed = frozenset(self.guessable)
        self.workers = workers
        self.top_n = top_n
        self.executor = executor

        self.state = ConstraintState()
        self.candidates: List[str] = list(self.guessable)
        self.rounds = 0

    @property
    def finished(self) -> bool:
        """True once the pool is small enough to guess directly."""
        return len(self.candidates) <= DIRECT_GUESS_LIMIT

    def suggest(self, *, progress: bool = False) -> RoundReport:
        return rank_round(self.guessable, self.state, self.candidates, self.workers,
                          top_n=self.top_n, executor=self.executor, progress=progress)

    def record(self, guess: str, pattern: Pattern) -> int:
        """
        Fold the feedback for `guess` into the state and shrink the pool.

        Returns the new pool size. Raises UnknownWordError if `guess` is not
        guessable; `pattern` is trusted (parse it with parse_feedback).
        """
        g = normalize_word(guess)
        if g not in self._allowed:
            raise UnknownWordError(f"not in the word list: {guess!r}")

        self.state = apply_feedback(self.state, g, pattern)
        before = len(self.candidates)
        self.candidates = filter_candidates(self.candidates, self.state)
        self.rounds += 1

        log.debug("round %d: %s %s -> %s | pool %d -> %d", self.rounds, g,
                  format_pattern(pattern), self.state.describe(), before, len(self.candidates))
        return len(self.candidates)
