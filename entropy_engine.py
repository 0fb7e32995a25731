"""Expected information (Shannon entropy) of a guess over a candidate pool."""

from __future__ import annotations

import os
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Sequence

import numpy as np

from wordle_env import feedback

# Below this pool size a process pool costs more than it saves.
PARALLEL_MIN_POOL = 200


def pattern_counts(guess: str, pool: Iterable[str]) -> Counter:
    """Count how many pool words produce each feedback pattern for *guess*."""
    return Counter(feedback(guess, word) for word in pool)


def entropy_from_counts(counts: Iterable[int]) -> float:
    """Shannon entropy (bits) of a distribution given by bucket counts.

    Counts are sorted first so the float result does not depend on the
    order the buckets were produced in.
    """
    arr = np.sort(np.fromiter(counts, dtype=np.float64))
    arr = arr[arr > 0]
    if arr.size == 0:
        raise ValueError("entropy of an empty distribution is undefined")
    probs = arr / arr.sum()
    return max(0.0, float(-np.sum(probs * np.log2(probs))))


def expected_information(guess: str, pool: Sequence[str]) -> float:
    """Bits of information *guess* is expected to reveal over *pool*."""
    if len(pool) == 0:
        raise ValueError("expected information needs a non-empty pool")
    return entropy_from_counts(pattern_counts(guess, pool).values())


# ------------------------------------------------------------------
# Batch scan (optionally parallel)
# ------------------------------------------------------------------

def _scan_chunk(args):
    """Worker: entropy of each guess in a chunk against the same pool."""
    chunk, pool = args
    return [(g, expected_information(g, pool)) for g in chunk]


def scan_entropies(
    guesses: Sequence[str],
    pool: Sequence[str],
    workers: int = 1,
    min_parallel: int = PARALLEL_MIN_POOL,
) -> dict[str, float]:
    """Expected information of every guess in *guesses* over *pool*.

    With ``workers > 1`` and a pool of at least *min_parallel* words the
    guesses are split into chunks evaluated in separate processes.  Each
    worker receives its own copy of the pool, so the caller must not rely
    on later changes to *pool* being seen.
    """
    if len(pool) == 0:
        raise ValueError("expected information needs a non-empty pool")
    if workers <= 0:
        workers = os.cpu_count() or 1

    guesses = list(guesses)
    pool = tuple(pool)
    if workers == 1 or len(pool) < min_parallel or len(guesses) < 2:
        return dict(_scan_chunk((guesses, pool)))

    chunk_size = max(1, len(guesses) // (workers * 4))
    chunks = [guesses[i:i + chunk_size] for i in range(0, len(guesses), chunk_size)]

    results: dict[str, float] = {}
    with ProcessPoolExecutor(max_workers=workers) as executor:
        for part in executor.map(_scan_chunk, [(ch, pool) for ch in chunks]):
            results.update(part)
    return results
