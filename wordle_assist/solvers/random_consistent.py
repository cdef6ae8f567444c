"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (words still
    consistent with all feedback so far).
  - If (unexpectedly) the pool is empty, fall back to the allowed list.

A baseline for the simulation harness: it makes no attempt to maximize
information gain.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else state["allowed"]
        return pool[self.rng.randrange(len(pool))]
