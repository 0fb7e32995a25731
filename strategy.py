"""Guess selection: entropy of each live word plus a popularity bonus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from candidate_pool import EmptyPool
from entropy_engine import scan_entropies
from lexicon import PopularityModel

DEFAULT_WORD_LENGTH = 5
# Highest-entropy word over data/word_freq.json, chosen offline with
# precompute_opener.py.  Other dictionaries and lengths compute their own.
DEFAULT_OPENING_GUESS = "stare"
DEFAULT_POPULARITY_WEIGHT = 0.0


@dataclass(frozen=True)
class SolverConfig:
    """Everything a solver needs at the start of each attempt.

    Attributes
    ----------
    vocabulary : tuple[str, ...]
        All valid words.  The secret is always one of them.
    popularity : PopularityModel
        Word -> popularity score in [0, 1].
    word_length : int
        Number of letters in each word.
    popularity_weight : float
        Multiplier on the popularity score added to each word's entropy.
        ``0`` selects on entropy alone.
    opening_guess : str or None
        First guess of every attempt, played without looking at the pool.
        ``None`` computes the highest-entropy word over the vocabulary
        once and reuses it.
    workers : int
        Processes used for the entropy scan (``1`` = in-process,
        ``0`` = one per CPU).
    """

    vocabulary: tuple[str, ...]
    popularity: PopularityModel
    word_length: int = DEFAULT_WORD_LENGTH
    popularity_weight: float = DEFAULT_POPULARITY_WEIGHT
    opening_guess: str | None = DEFAULT_OPENING_GUESS
    workers: int = 1

    def __post_init__(self) -> None:
        if not self.vocabulary:
            raise ValueError("vocabulary is empty")
        bad = [w for w in self.vocabulary if len(w) != self.word_length]
        if bad:
            raise ValueError(
                f"Words with wrong length (expected {self.word_length}): {bad[:5]}"
            )
        if self.popularity_weight < 0:
            raise ValueError(
                f"popularity_weight must be >= 0, got {self.popularity_weight}"
            )
        if self.opening_guess is not None and len(self.opening_guess) != self.word_length:
            raise ValueError(
                f"opening guess {self.opening_guess!r} is not "
                f"{self.word_length} letters long"
            )
        if self.workers < 0:
            raise ValueError(f"workers must be >= 0, got {self.workers}")


@dataclass(frozen=True)
class ScoredGuess:
    """A selected guess and the numbers behind it.

    ``entropy``, ``popularity`` and ``score`` are None for the opening
    guess, which is played without scoring.
    """
    word: str
    pool_size: int
    score: float | None = None
    entropy: float | None = None
    popularity: float | None = None


def select_guess(
    pool: Sequence[str],
    popularity: PopularityModel,
    popularity_weight: float = DEFAULT_POPULARITY_WEIGHT,
    workers: int = 1,
) -> ScoredGuess:
    """Return the live word with the highest entropy + weighted popularity.

    Ties go to the lexicographically smallest word, whatever the pool order.
    """
    if popularity_weight < 0:
        raise ValueError(f"popularity_weight must be >= 0, got {popularity_weight}")
    if len(pool) == 0:
        raise EmptyPool("cannot select a guess from an empty pool")

    entropies = scan_entropies(pool, pool, workers=workers)

    best: ScoredGuess | None = None
    for word in sorted(entropies):
        pop = popularity.score(word)
        ent = entropies[word]
        score = ent + popularity_weight * pop
        if best is None or score > best.score:
            best = ScoredGuess(
                word=word,
                pool_size=len(pool),
                score=score,
                entropy=ent,
                popularity=pop,
            )
    return best


def rank_openers(
    vocabulary: Sequence[str],
    top: int = 10,
    workers: int = 1,
) -> list[tuple[str, float]]:
    """The *top* words by entropy over the whole vocabulary, best first."""
    entropies = scan_entropies(vocabulary, vocabulary, workers=workers)
    ranked = sorted(entropies.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:top]
