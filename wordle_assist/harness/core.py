"""
Simulation harness core primitives.

- run_case:  play a single game (one hidden answer) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The harness plays the driver's role: it scores each guess against the hidden
answer, folds the feedback into the constraint state and shrinks the pool,
exactly like an interactive session does with user-supplied feedback.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Tuple
from wordle_assist.engine import (
    ALL_CORRECT, ConstraintState, apply_feedback, filter_candidates, format_pattern, score_guess,
)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        allowed: Iterable[str],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:        an object implementing BaseSolver with next_guess(state)
        answer:        the hidden word for this case
        allowed:       all words permitted as guesses; also the starting pool
        max_turns:     must be 6 (Wordle rule; enforced)
        seed:          RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern_text)]), pool_sizes (list[int]),
            answer (str)
    """
    _assert_wordle_turns(max_turns)

    allowed = list(allowed)
    solver.reset(allowed=allowed, seed=seed)

    history: List[Tuple[str, str]] = []
    constraints = ConstraintState()
    candidates = list(allowed)
    pool_sizes = [len(candidates)]

    t0 = time.perf_counter()
    success = False
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        state = {
            "turn": turn,
            "candidates": candidates,
            "allowed": allowed,
            "constraints": constraints,
        }
        guess = solver.next_guess(state)

        patt = score_guess(guess, answer)
        history.append((guess, format_pattern(patt)))

        if patt == ALL_CORRECT:
            success = True
            break

        # Narrow the pool using the new feedback before the next turn
        constraints = apply_feedback(constraints, guess, patt)
        candidates = filter_candidates(candidates, constraints)
        pool_sizes.append(len(candidates))

    return {
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "pool_sizes": pool_sizes,
        "answer": answer,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        allowed: List[str],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, ans, allowed=allowed, max_turns=WORDLE_MAX_TURNS, seed=case_seed))
    return out
