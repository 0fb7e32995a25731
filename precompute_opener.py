#!/usr/bin/env python3
"""Find the highest-entropy opening guess for a word list.

The solver plays a fixed opener instead of scanning the whole vocabulary
at the start of every attempt; this script is how that opener is chosen.
Uses all CPU cores by default.

Usage:
    python3 precompute_opener.py                         # data/word_freq.json
    python3 precompute_opener.py --words words.csv --top 20
    python3 precompute_opener.py --workers 1             # single process
"""

from __future__ import annotations

import argparse
import sys
import time

from lexicon import load_lexicon
from strategy import DEFAULT_WORD_LENGTH, rank_openers


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Rank opening guesses by expected information",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list (default: data/word_freq.json)")
    parser.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH,
                        help=f"Word length (default: {DEFAULT_WORD_LENGTH})")
    parser.add_argument("--top", type=int, default=20,
                        help="How many openers to list (default: 20)")
    parser.add_argument("--workers", type=int, default=0,
                        help="Parallel workers (default: all CPU cores)")
    args = parser.parse_args()

    try:
        lex = load_lexicon(path=args.words, word_length=args.length)
    except (OSError, ValueError) as exc:
        print(f"Cannot load word list: {exc}", file=sys.stderr)
        sys.exit(1)

    n = len(lex.words)
    print(f"Evaluating {n} guesses x {n} candidates ...", flush=True)
    t0 = time.time()
    ranked = rank_openers(lex.words, top=args.top, workers=args.workers)
    elapsed = time.time() - t0

    print(f"\nTop {len(ranked)} openers ({elapsed:.0f}s):")
    for word, ent in ranked:
        print(f"  {word}: {ent:.4f} bits  pop={lex.popularity.score(word):.3f}")


if __name__ == "__main__":
    main()
