"""
Clean a dictionary file so it validates.

Features:
- Splits on any whitespace (several words per line are fine).
- Lowercases, drops anything that isn't a five-letter a–z word.
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in words.txt --sort
"""

import argparse
from pathlib import Path

from wordle_assist.datasets import load_words, pretty_summary, validate_wordlist, write_lines


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a five-letter word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    before = validate_wordlist(str(inp))
    print("before:", pretty_summary(before))

    words = load_words(inp)
    if args.sort:
        words = sorted(words)
    write_lines(words, outp)

    print("after: ", pretty_summary(validate_wordlist(str(outp))))


if __name__ == "__main__":
    main()
