"""
Constraint state and candidate filtering.

Given:
  - the state accumulated so far (fixed slots, present letters, absent letters)
  - the latest (guess, pattern) pair

Produce:
  - a NEW state carrying the extra evidence (states are never mutated), and
  - the subset of a pool that is still consistent with it.

This is the step that turns feedback into a shrinking candidate pool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

from .feedback import Outcome, Pattern, WORD_LENGTH

Slots = Tuple[Optional[str], ...]


@dataclass(frozen=True)
class ConstraintState:
    """Everything learned so far. The empty state constrains nothing."""
    fixed: Slots = (None,) * WORD_LENGTH   # letter per slot, None = unconstrained
    present: FrozenSet[str] = field(default_factory=frozenset)
    absent: FrozenSet[str] = field(default_factory=frozenset)

    def describe(self) -> str:
        """Short human-readable summary, e.g. "s..e. +a -iro"."""
        slots = "".join(ch or "." for ch in self.fixed)
        return f"{slots} +{''.join(sorted(self.present))} -{''.join(sorted(self.absent))}"


def apply_feedback(state: ConstraintState, guess: str, pattern: Pattern) -> ConstraintState:
    """
    Fold one (guess, pattern) pair into `state` and return the new state.

    Passes run in a fixed order so that a letter which is grey in one slot
    and yellow/green in another slot of the same guess ends up NOT absent:
      1) every ABSENT letter  -> absent
      2) every PRESENT letter -> present, and removed from absent
      3) every CORRECT letter -> fixed slot, and removed from absent

    `pattern` is assumed valid (five Outcome values); nothing is checked.
    """
    fixed = list(state.fixed)
    present = set(state.present)
    absent = set(state.absent)

    for ch, o in zip(guess, pattern):
        if o == Outcome.ABSENT:
            absent.add(ch)

    for ch, o in zip(guess, pattern):
        if o == Outcome.PRESENT:
            present.add(ch)
            absent.discard(ch)

    for i, (ch, o) in enumerate(zip(guess, pattern)):
        if o == Outcome.CORRECT:
            fixed[i] = ch
            absent.discard(ch)

    return ConstraintState(tuple(fixed), frozenset(present), frozenset(absent))


def is_consistent(state: ConstraintState, word: str) -> bool:
    """
    True iff `word` satisfies every constraint in `state`:
      (a) each fixed slot holds its fixed letter,
      (b) no absent letter appears anywhere,
      (c) each present letter appears somewhere.
    """
    for want, got in zip(state.fixed, word):
        if want is not None and want != got:
            return False

    if state.absent and not state.absent.isdisjoint(word):
        return False

    for ch in state.present:
        if ch not in word:
            return False

    return True


def filter_candidates(words: Iterable[str], state: ConstraintState) -> List[str]:
    """
    Keep only words consistent with `state` (order preserved as in `words`).
    """
    return [w for w in words if is_consistent(state, w)]
