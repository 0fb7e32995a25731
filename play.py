#!/usr/bin/env python3
"""Solve a single puzzle, either against a known secret or interactively.

examples:
  python play.py --secret crane                 # automated, oracle feedback
  python play.py --interactive                  # type the feedback yourself
  python play.py --secret crane --verbose       # per-round breakdown
  python play.py --popularity-weight 0.5        # prefer common words
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from candidate_pool import EmptyPool
from lexicon import DEFAULT_STEEPNESS, load_lexicon
from solver import AttemptResult, WordleSolver
from strategy import (
    DEFAULT_OPENING_GUESS,
    DEFAULT_POPULARITY_WEIGHT,
    DEFAULT_WORD_LENGTH,
    ScoredGuess,
    SolverConfig,
)
from wordle_env import MalformedFeedback


def add_solver_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every script that builds a solver."""
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list (.json, .csv or .txt; "
                             "default: data/word_freq.json)")
    parser.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH,
                        help=f"Word length (default: {DEFAULT_WORD_LENGTH})")
    parser.add_argument("--prescored", action="store_true",
                        help="Word list values already are popularity scores in [0, 1]")
    parser.add_argument("--log-offset", type=float, default=None,
                        help="Log-count shift of the popularity sigmoid "
                             "(default: mean log-count)")
    parser.add_argument("--steepness", type=float, default=DEFAULT_STEEPNESS,
                        help=f"Steepness of the popularity sigmoid (default: {DEFAULT_STEEPNESS})")
    parser.add_argument("--popularity-weight", type=float, default=DEFAULT_POPULARITY_WEIGHT,
                        help="Weight of popularity next to entropy "
                             f"(default: {DEFAULT_POPULARITY_WEIGHT})")
    parser.add_argument("--opener", type=str, default=None,
                        help=f"Opening guess (default: {DEFAULT_OPENING_GUESS} for the "
                             "bundled 5-letter list, 'auto' otherwise); "
                             "'auto' computes it from the word list")
    parser.add_argument("--workers", type=int, default=1,
                        help="Processes for the entropy scan (default: 1, 0 = all cores)")


def build_config(args: argparse.Namespace) -> SolverConfig:
    lex = load_lexicon(
        path=args.words,
        word_length=args.length,
        prescored=args.prescored,
        log_offset=args.log_offset,
        steepness=args.steepness,
    )
    if args.opener is None:
        bundled = args.words is None and args.length == DEFAULT_WORD_LENGTH
        opener = DEFAULT_OPENING_GUESS if bundled else None
    elif args.opener == "auto":
        opener = None
    else:
        opener = args.opener.strip().lower()
    return SolverConfig(
        vocabulary=tuple(lex.words),
        popularity=lex.popularity,
        word_length=args.length,
        popularity_weight=args.popularity_weight,
        opening_guess=opener,
        workers=args.workers,
    )


def format_round(number: int, guess: ScoredGuess) -> str:
    if guess.score is None:
        return f"  Guess {number}: {guess.word}  (opener, {guess.pool_size} words)"
    return (
        f"  Guess {number}: {guess.word}  pool={guess.pool_size}  "
        f"H={guess.entropy:.3f} bits  pop={guess.popularity:.3f}  "
        f"score={guess.score:.3f}"
    )


def result_to_dict(result: AttemptResult) -> dict:
    return {
        "num_guesses": result.num_guesses,
        "solution": result.solution,
        "rounds": [
            {
                "guess": r.word,
                "feedback": pat,
                "pool_size": r.pool_size,
                "entropy_bits": r.entropy,
                "popularity": r.popularity,
                "score": r.score,
            }
            for r, (_, pat) in zip(result.rounds, result.history)
        ],
    }


def _prompt_feedback(word: str) -> str:
    print(f"Guess - {word}")
    return input("Enter result (X grey, Y yellow, G green, e.g. 'XYYXG'): ")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Entropy Wordle solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n\n", 1)[1],
    )
    add_solver_arguments(parser)
    parser.add_argument("--secret", type=str, default=None,
                        help="Secret word to solve automatically (prompted if omitted)")
    parser.add_argument("--interactive", action="store_true",
                        help="Read feedback from the console instead of the oracle")
    parser.add_argument("--verbose", action="store_true", help="Print per-round details")
    parser.add_argument("--json", type=str, default=None, help="Save the round log as JSON")
    args = parser.parse_args()

    try:
        config = build_config(args)
    except (OSError, ValueError) as exc:
        print(f"Cannot set up solver: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Loaded {len(config.vocabulary)} words of length {config.word_length}")

    solver = WordleSolver(config)
    rounds = 0

    def on_round(guess: ScoredGuess) -> None:
        nonlocal rounds
        rounds += 1
        if args.verbose:
            print(format_round(rounds, guess))

    try:
        if args.interactive:
            result = solver.run(_prompt_feedback, on_round=on_round)
            print(f"Congrats on solving the puzzle - {result.solution}")
        else:
            secret = args.secret or input("Enter correct string - ")
            print(f"Trying to guess word - {secret}")
            result = solver.solve(secret, on_round=on_round)
            print(f"Tries {result.num_guesses}")
    except MalformedFeedback as exc:
        print(f"Malformed feedback: {exc}", file=sys.stderr)
        sys.exit(2)
    except EmptyPool as exc:
        print(f"Contradictory feedback, no word fits: {exc}", file=sys.stderr)
        sys.exit(2)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except (EOFError, KeyboardInterrupt):
        print("\nAborted before the puzzle was solved", file=sys.stderr)
        sys.exit(1)

    if args.json:
        json_path = Path(args.json)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(result_to_dict(result), indent=2), encoding="utf-8")
        print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
