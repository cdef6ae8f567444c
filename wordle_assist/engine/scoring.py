"""
Expected information gain of a single guess.

For guess g over the current pool (size n):
  - Partition the pool by the pattern each possible answer would produce.
  - For each observed pattern p with count c, fold p into the state and count
    k = words of the pool still consistent afterwards.
  - E[gain | g] = sum_p (c / n) * log2(n / k)

That is the expected drop in log2(pool size), in bits, assuming the answer is
uniform over the pool. Every answer that produced p stays consistent with the
state derived from p, so k >= c >= 1 and the ratio is always defined.

Cost is O(pool) for the partition plus O(pool) per distinct pattern; the
ranking layer parallelizes across guesses, never within one guess.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Sequence

import numpy as np

from .constraints import ConstraintState, apply_feedback, is_consistent
from .feedback import Pattern, score_guess


class EmptyPoolError(ValueError):
    """Raised when asked to score against an empty candidate pool."""


def partition_pool(guess: str, pool: Sequence[str]) -> Dict[Pattern, int]:
    """Pattern -> number of pool words that would produce it for `guess`."""
    buckets: Dict[Pattern, int] = defaultdict(int)
    # localize for speed
    _score = score_guess
    for ans in pool:
        buckets[_score(guess, ans)] += 1
    return dict(buckets)


def expected_information_gain(guess: str, state: ConstraintState, pool: Sequence[str]) -> float:
    """
    Expected bits of information gained by playing `guess` (see module docs).

    Raises EmptyPoolError if `pool` is empty.
    """
    n = len(pool)
    if n == 0:
        raise EmptyPoolError("candidate pool is empty; nothing to score against")

    buckets = partition_pool(guess, pool)

    counts = np.fromiter(buckets.values(), dtype=np.float64, count=len(buckets))
    remaining = np.empty_like(counts)
    for j, patt in enumerate(buckets):
        after = apply_feedback(state, guess, patt)
        remaining[j] = sum(1 for w in pool if is_consistent(after, w))

    return float(np.sum(counts / n * np.log2(n / remaining)))
