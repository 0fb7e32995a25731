#!/usr/bin/env python3
"""Score the solver over many secrets.

Features:
  - Solves every secret from a test file (one word per line).
  - Runs attempts in parallel (each worker owns its own solver and pool).
  - Outputs summary table, CSV, JSON and histogram.
"""

from __future__ import annotations

import argparse
import csv
import json
import os
import sys
import time as _time_mod
from concurrent.futures import ProcessPoolExecutor
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path

from candidate_pool import EmptyPool
from solver import WordleSolver, opening_guess
from strategy import SolverConfig

_DIR = Path(__file__).resolve().parent
RESULTS_DIR = _DIR / "results"
DEFAULT_TEST_FILE = _DIR / "data" / "test_words.txt"
PROGRESS_EVERY = 101


# ------------------------------------------------------------------
# Result containers
# ------------------------------------------------------------------

@dataclass
class GameResult:
    secret: str
    num_guesses: int
    solved: bool
    error: str | None = None


@dataclass
class BenchmarkResults:
    games: list[GameResult] = field(default_factory=list)

    def summary(self) -> dict:
        n = len(self.games)
        solved = [g for g in self.games if g.solved]
        guesses = sorted(g.num_guesses for g in solved)
        k = len(guesses)
        if k:
            mean = sum(guesses) / k
            median = guesses[k // 2] if k % 2 == 1 else (
                guesses[k // 2 - 1] + guesses[k // 2]
            ) / 2
            mx = guesses[-1]
        else:
            mean = median = mx = 0
        dist: dict[str, int] = {}
        for g in self.games:
            key = str(g.num_guesses) if g.solved else "failed"
            dist[key] = dist.get(key, 0) + 1
        return {
            "games_played": n,
            "games_solved": k,
            "solve_rate": round(k / n, 4) if n else 0,
            "mean_guesses": round(mean, 3),
            "median_guesses": median,
            "max_guesses": mx,
            "failures": n - k,
            "guess_distribution": dist,
        }

    def print_summary(self) -> None:
        s = self.summary()
        print(f"\n{'Games':>6} {'Solved':>7} {'Rate':>6} {'Mean':>6} "
              f"{'Median':>7} {'Max':>5} {'Failed':>7}")
        print("-" * 50)
        print(f"{s['games_played']:>6} {s['games_solved']:>7} "
              f"{100 * s['solve_rate']:>5.1f}% {s['mean_guesses']:>6.2f} "
              f"{s['median_guesses']:>7.1f} {s['max_guesses']:>5} {s['failures']:>7}")
        for g in self.games:
            if not g.solved:
                print(f"  failed {g.secret}: {g.error}", file=sys.stderr)
        print()

    def to_csv(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["secret", "num_guesses", "solved", "error"])
            for g in self.games:
                writer.writerow([g.secret, g.num_guesses, int(g.solved), g.error or ""])

    def to_json(self, path: str | Path, config: dict | None = None) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "config": config or {},
            "summary": self.summary(),
            "games": [asdict(g) for g in self.games],
        }
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def plot_histogram(self, path: str | Path | None = None) -> None:
        try:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib not installed, skipping plot", file=sys.stderr)
            return

        guesses = [g.num_guesses for g in self.games if g.solved]
        if not guesses:
            return
        bins = list(range(1, max(guesses) + 2))

        fig, ax = plt.subplots(figsize=(6, 4))
        ax.hist(guesses, bins=bins, edgecolor="black", align="left")
        ax.set_title("Guess-count distribution")
        ax.set_xlabel("Guesses")
        ax.set_ylabel("Count")
        fig.tight_layout()
        dest = Path(path) if path else RESULTS_DIR / "benchmark.png"
        dest.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(dest, dpi=150)
        plt.close(fig)
        print(f"Histogram saved to {dest}")


# ------------------------------------------------------------------
# Worker function (runs in a child process)
# ------------------------------------------------------------------

def solve_one(config: SolverConfig, secret: str) -> GameResult:
    """Run one attempt; contradictions and unknown secrets become failures."""
    solver = WordleSolver(config)
    try:
        result = solver.solve(secret)
    except (EmptyPool, ValueError) as exc:
        return GameResult(
            secret=secret,
            num_guesses=len(solver.history),
            solved=False,
            error=f"{type(exc).__name__}: {exc}",
        )
    return GameResult(secret=secret, num_guesses=result.num_guesses, solved=True)


def _solve_chunk(args) -> list[GameResult]:
    config, secrets = args
    return [solve_one(config, s) for s in secrets]


# ------------------------------------------------------------------
# Runner
# ------------------------------------------------------------------

def load_secrets(path: str | Path) -> list[str]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Test file not found: {p}")
    return [line.strip().lower() for line in p.read_text(encoding="utf-8").splitlines()
            if line.strip()]


def run_benchmark(
    config: SolverConfig,
    secrets: list[str],
    max_workers: int | None = 1,
    verbose: bool = True,
) -> BenchmarkResults:
    """Solve every secret and collect the results in input order.

    Attempts are independent, so with ``max_workers > 1`` chunks of
    secrets are solved in separate processes.  The entropy scan inside
    each attempt stays serial in that case.
    """
    if max_workers is None or max_workers <= 0:
        max_workers = os.cpu_count() or 1

    results = BenchmarkResults()
    total = solved = 0

    def _collect(batch: list[GameResult]) -> None:
        nonlocal total, solved
        for g in batch:
            results.games.append(g)
            if g.solved:
                total += g.num_guesses
                solved += 1
            if verbose and len(results.games) % PROGRESS_EVERY == 0:
                # Failed attempts have no score; average over solved ones.
                avg = total / solved if solved else 0.0
                print(f"Current avg score {avg:.3f} "
                      f"({len(results.games)}/{len(secrets)})", flush=True)

    if max_workers == 1 or len(secrets) < 2:
        for secret in secrets:
            _collect([solve_one(config, secret)])
        return results

    if config.workers != 1 or config.opening_guess is None:
        config = replace(config, workers=1, opening_guess=opening_guess(config))
    chunk_size = max(1, len(secrets) // (max_workers * 4))
    chunks = [secrets[i:i + chunk_size] for i in range(0, len(secrets), chunk_size)]

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        for batch in executor.map(_solve_chunk, [(config, ch) for ch in chunks]):
            _collect(batch)
    return results


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def main() -> None:
    from play import add_solver_arguments, build_config

    parser = argparse.ArgumentParser(
        description="Score the entropy solver over a file of secrets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python benchmark.py                                   # data/test_words.txt
  python benchmark.py --tests my_words.txt --jobs 4     # 4 attempts in parallel
  python benchmark.py --popularity-weight 0.5 --csv out.csv
""",
    )
    add_solver_arguments(parser)
    parser.add_argument("--tests", type=str, default=str(DEFAULT_TEST_FILE),
                        help="File of secrets, one per line (default: data/test_words.txt)")
    parser.add_argument("--jobs", type=int, default=1,
                        help="Attempts solved in parallel (default: 1, 0 = all cores)")
    parser.add_argument("--csv", type=str, default=None, help="Save results CSV path")
    parser.add_argument("--json", type=str, default=None, help="Save results JSON path")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram path")
    args = parser.parse_args()

    try:
        config = build_config(args)
        secrets = load_secrets(args.tests)
    except (OSError, ValueError) as exc:
        print(f"Cannot start benchmark: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Vocabulary: {len(config.vocabulary)} words of length {config.word_length}")
    print(f"Solving {len(secrets)} secrets (jobs: {args.jobs}) ...", flush=True)

    t0 = _time_mod.time()
    results = run_benchmark(config, secrets, max_workers=args.jobs)
    elapsed = _time_mod.time() - t0

    results.print_summary()
    print(f"Avg score {results.summary()['mean_guesses']:.3f}")
    print(f"Elapsed: {elapsed:.1f}s")

    if args.csv:
        results.to_csv(args.csv)
        print(f"CSV saved to {args.csv}")
    if args.json:
        results.to_json(args.json, config={
            "word_length": config.word_length,
            "popularity_weight": config.popularity_weight,
            "opening_guess": config.opening_guess,
            "tests": args.tests,
        })
        print(f"JSON saved to {args.json}")
    if args.plot:
        results.plot_histogram(args.plot)


if __name__ == "__main__":
    main()
