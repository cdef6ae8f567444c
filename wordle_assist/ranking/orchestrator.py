"""
Ranking orchestrator: score every guessable word and keep the best.

Main idea:
  - Split the guessable list into `workers` interleaved slices
    (word i -> slice i % workers) so each slice gets a similar mix of words.
  - Each task scores its slice against the SAME state and pool and returns
    its own (word, score) list. Inputs are immutable for the round, so tasks
    share them without locking.
  - After every task has been joined, merge once, sort by score descending
    and keep the top N.

An executor is created for each round and shut down before results are used;
nothing outlives the call.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple

from tqdm import tqdm

from wordle_assist.engine import ConstraintState, EmptyPoolError, expected_information_gain

log = logging.getLogger(__name__)

TOP_N = 10
DIRECT_GUESS_LIMIT = 2    # pool this small: just guess one of the words
LISTING_LIMIT = 20        # pool this small: list every word for display
FALLBACK_WORKERS = 8

EXECUTORS = ("thread", "process")


class Suggestion(NamedTuple):
    word: str
    score: float


@dataclass(frozen=True)
class RoundReport:
    """What the driver shows for one round."""
    pool_size: int
    listing: Tuple[str, ...]          # whole pool when pool_size <= LISTING_LIMIT
    suggestions: Tuple[Suggestion, ...]
    direct: bool                      # pool_size <= DIRECT_GUESS_LIMIT; nothing was scored


def default_worker_count() -> int:
    """Hardware parallelism, or FALLBACK_WORKERS when it cannot be detected."""
    return os.cpu_count() or FALLBACK_WORKERS


def interleave(words: Sequence[str], workers: int) -> List[List[str]]:
    """Slice k holds words[k], words[k + workers], ... (empty slices dropped)."""
    return [list(words[k::workers]) for k in range(workers) if k < len(words)]


def _score_slice(words: Sequence[str], state: ConstraintState,
                 pool: Sequence[str]) -> List[Suggestion]:
    # Module-level so a ProcessPoolExecutor can pickle it.
    return [Suggestion(w, expected_information_gain(w, state, pool)) for w in words]


def _make_executor(kind: str, workers: int) -> Executor:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=workers)
    if kind == "process":
        return ProcessPoolExecutor(max_workers=workers)
    raise ValueError(f"Unknown executor: {kind}. Available: {list(EXECUTORS)}")


def rank_guesses(
        guessable: Sequence[str],
        state: ConstraintState,
        pool: Sequence[str],
        workers: int | None = None,
        *,
        top_n: int = TOP_N,
        executor: str = "thread",
        progress: bool = False,
) -> List[Suggestion]:
    """
    Score every word of `guessable` against `pool` and return the best `top_n`
    as Suggestions, highest score first.

    Args:
      guessable : every legal guess (read-only for the round)
      state     : constraint state the pool was filtered with
      pool      : current candidate pool (must be non-empty)
      workers   : number of slices/tasks; default_worker_count() if None
      top_n     : how many suggestions to keep (fewer if guessable is shorter)
      executor  : "thread" (shared memory) or "process"
      progress  : show a tqdm bar over completed slices

    Raises:
      EmptyPoolError if `pool` is empty; ValueError on a bad worker count,
      top_n or executor kind.
    """
    if workers is None:
        workers = default_worker_count()
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1; got {top_n}")
    if executor not in EXECUTORS:
        raise ValueError(f"Unknown executor: {executor}. Available: {list(EXECUTORS)}")
    if not pool:
        raise EmptyPoolError("candidate pool is empty; nothing to score against")

    slices = interleave(guessable, workers)
    t0 = time.perf_counter()

    results: List[Suggestion] = []
    if slices:
        with _make_executor(executor, len(slices)) as ex:
            futures = [ex.submit(_score_slice, s, state, pool) for s in slices]
            done = as_completed(futures)
            if progress:
                done = tqdm(done, total=len(futures), ncols=80, desc="Scoring", unit="slice")
            for fut in done:
                # Merge after join: each future is already finished here.
                results.extend(fut.result())

    results.sort(key=lambda s: s.score, reverse=True)
    log.debug("scored %d guesses against %d candidates on %d %s worker(s) in %.2fs",
              len(results), len(pool), len(slices), executor, time.perf_counter() - t0)
    return results[:top_n]


def rank_round(
        guessable: Sequence[str],
        state: ConstraintState,
        pool: Sequence[str],
        workers: int | None = None,
        *,
        top_n: int = TOP_N,
        executor: str = "thread",
        progress: bool = False,
) -> RoundReport:
    """
    Build the report for one round. Small pools (<= DIRECT_GUESS_LIMIT) skip
    scoring entirely and come back with direct=True and no suggestions.
    """
    listing = tuple(pool) if len(pool) <= LISTING_LIMIT else ()

    if len(pool) <= DIRECT_GUESS_LIMIT:
        return RoundReport(pool_size=len(pool), listing=listing, suggestions=(), direct=True)

    ranked = rank_guesses(guessable, state, pool, workers,
                          top_n=top_n, executor=executor, progress=progress)
    return RoundReport(pool_size=len(pool), listing=listing,
                       suggestions=tuple(ranked), direct=False)
