# apps/cli/run.py
"""
Interactive solving assistant.

This script:
  1) Validates the word list (prints counts + SHA) and loads it.
  2) Each round prints the best guesses by expected information gain, plus
     the remaining candidates when there are only a few.
  3) Reads the word you played and the feedback you got
     (5 symbols: x=grey, y=yellow, g=green), re-prompting on bad input.
  4) Stops once two or fewer candidates remain, or on end of input.

Usage:
    python -m apps.cli.run --words words.txt --workers 8
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from wordle_assist.datasets import load_words, pretty_summary, validate_wordlist
from wordle_assist.engine import FeedbackError, parse_feedback, validate_guess
from wordle_assist.ranking import TOP_N, RoundReport
from wordle_assist.ranking.orchestrator import EXECUTORS
from wordle_assist.session import Session
from wordle_assist.solvers.info_gain import OPENING_GUESS


def _ask(prompt: str) -> Optional[str]:
    """Prompt on stdout; None on end of input."""
    print(prompt)
    try:
        return input().strip()
    except EOFError:
        return None


def _print_report(report: RoundReport) -> None:
    print(f"\n{report.pool_size} words remaining", end="")
    if report.listing:
        print(":\n")
        print("\n".join(report.listing))
    else:
        print()

    if report.direct:
        return

    print("\nBest guesses to reduce the number of words remaining:\n")
    for s in report.suggestions:
        print(f"{s.word} \t{s.score:.6f}")


def _read_guess(allowed: frozenset) -> Optional[str]:
    while True:
        text = _ask("\nEnter guessed word:")
        if text is None:
            return None
        if validate_guess(text, allowed):
            return text.lower()
        print("Error! Not in the word list.")


def _read_feedback():
    while True:
        text = _ask("\nEnter result (5 letters, x=grey, y=yellow, g=green):")
        if text is None:
            return None
        try:
            return parse_feedback(text)
        except FeedbackError as e:
            print(f"Error! {e}")


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary, then run the guess/feedback loop.
    Returns a process exit status.
    """
    ap = argparse.ArgumentParser(description="wordle-assist: suggest the most informative next guess")
    ap.add_argument("--words", default="words.txt",
                    help="whitespace-delimited list of five-letter guessable words")
    ap.add_argument("--workers", type=int,
                    help="parallel scoring tasks (default: CPU count, or 8 if unknown)")
    ap.add_argument("--executor", choices=EXECUTORS, default="thread",
                    help="run scoring tasks on threads or on processes")
    ap.add_argument("--top", type=int, default=TOP_N, help="how many suggestions to print")
    ap.add_argument("--opening", default=OPENING_GUESS,
                    help="word to suggest on the first round instead of ranking the whole list")
    ap.add_argument("--no-opening", action="store_true",
                    help="rank the whole list on the first round too")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="show a scoring progress bar (auto=bar if stderr is a terminal)")
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.workers is not None and args.workers < 1:
        ap.error("--workers must be >= 1")
    if args.top < 1:
        ap.error("--top must be >= 1")

    # 1) Validate and load the dictionary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2
    # load_words lowercases tokens the strict validator counts as invalid
    words = load_words(args.words)
    if not words:
        return 2

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    session = Session(words, workers=args.workers, top_n=args.top, executor=args.executor)
    allowed = frozenset(words)

    # 2) Guess/feedback loop
    opening = None if args.no_opening else args.opening.lower()
    while True:
        if session.rounds == 0 and opening and opening in allowed:
            print(f'\nBest guess: "{opening}"')
        else:
            if not session.finished:
                print("\nWorking...")
            report = session.suggest(progress=progress)
            _print_report(report)
            if report.direct:
                return 0

        guess = _read_guess(allowed)
        if guess is None:
            return 0
        pattern = _read_feedback()
        if pattern is None:
            return 0

        session.record(guess, pattern)


if __name__ == "__main__":
    sys.exit(main())
