"""
Information Gain solver.

Plays the top suggestion of the ranking orchestrator, i.e. the allowed word
with the highest expected information gain over the current pool.

Special cases:
  - Turn 1 plays OPENING_GUESS when it is allowed (the full-dictionary
    ranking is fixed for a given list and is the slowest round).
  - A pool of DIRECT_GUESS_LIMIT words or fewer is not ranked: play one of
    them (seeded RNG picks which).
Tie-break: among equally scored top words, prefer one still in the pool.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register
from wordle_assist.ranking import DIRECT_GUESS_LIMIT, TOP_N, rank_guesses

OPENING_GUESS = "serai"


@register
class InfoGainSolver(BaseSolver):
    id = "info_gain"
    name = "Expected Information Gain"
    version = "1.0.0"

    # Tuned by the caller (e.g. the simulate CLI) after creation.
    workers: int | None = None
    executor: str = "thread"
    opening: str | None = OPENING_GUESS

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if state["turn"] == 1 and self.opening and self.opening in allowed:
            return self.opening

        if len(candidates) <= DIRECT_GUESS_LIMIT:
            return candidates[self.rng.randrange(len(candidates))]

        ranked = rank_guesses(allowed, state["constraints"], candidates, self.workers,
                              top_n=TOP_N, executor=self.executor)
        best = ranked[0].score

        # Nothing left to learn: every guess is as good as a blind one, so play
        # a word that can actually win.
        if best <= 0.0:
            return candidates[self.rng.randrange(len(candidates))]

        # Tie-break among equally informative words: prefer a possible answer.
        tied = [s.word for s in ranked if s.score >= best - 1e-12]
        possible = set(candidates)
        for w in tied:
            if w in possible:
                return w
        return tied[0]
