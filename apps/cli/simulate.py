# apps/cli/simulate.py
"""
Offline simulation: let a solver play against every word of the dictionary.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads it and instantiates the requested solver.
  3) Plays one game per hidden answer with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern/pool-size columns
       - JSON: manifest with config, word list hash, git commit, summary stats
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_assist.datasets import load_words, pretty_summary, validate_wordlist
from wordle_assist.harness import WORDLE_MAX_TURNS, run_case
from wordle_assist.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_assist.ranking.orchestrator import EXECUTORS
from wordle_assist.solvers import create_solver, get_solver_ids
from wordle_assist.solvers.info_gain import InfoGainSolver


def main(argv=None) -> int:
    """
    Parse CLI args, validate the word list, run the games with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-assist: simulate solver games")
    ap.add_argument("--solver", default="info_gain",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="words.txt",
                    help="whitespace-delimited list of five-letter words (guesses and answers)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, help="parallel scoring tasks for info_gain")
    ap.add_argument("--executor", choices=EXECUTORS, default="thread")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if stderr is a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Load, then instantiate the solver by id
    words = load_words(args.words)
    if not words:
        return 2
    solver = create_solver(args.solver)
    if isinstance(solver, InfoGainSolver):
        solver.workers = args.workers
        solver.executor = args.executor

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 5) Play with live progress
    for idx, ans in enumerate(iterator, 1):
        # Per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223
        r = run_case(solver, ans, allowed=words, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 6) Write outputs (CSV + manifest)
    solved = [r for r in results if r["success"]]
    mean_guesses = (sum(r["guesses"] for r in solved) / len(solved)) if solved else None

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solved": len(solved),
        "mean_guesses": mean_guesses,
        "solver_id": solver.id,
    }, str(manifest_path))

    print(f"Solved {len(solved)}/{len(results)}"
          + (f" | mean guesses {mean_guesses:.3f}" if mean_guesses is not None else ""))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
