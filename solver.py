"""Solver loop: play rounds until the feedback is all green."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from candidate_pool import CandidatePool, EmptyPool
from strategy import ScoredGuess, SolverConfig, rank_openers, select_guess
from wordle_env import WordleEnv, is_solved, parse_feedback


class SolverState(Enum):
    AWAITING_FIRST_GUESS = "awaiting_first_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    SOLVED = "solved"
    CONTRADICTED = "contradicted"


@dataclass
class AttemptResult:
    """Outcome of one solved attempt."""
    num_guesses: int
    history: list[tuple[str, str]] = field(default_factory=list)
    rounds: list[ScoredGuess] = field(default_factory=list)

    @property
    def solution(self) -> str:
        return self.history[-1][0]


@functools.lru_cache(maxsize=8)
def _best_opener(vocabulary: tuple[str, ...], workers: int) -> str:
    return rank_openers(vocabulary, top=1, workers=workers)[0][0]


def opening_guess(config: SolverConfig) -> str:
    """The configured opener, or the best one computed once per vocabulary."""
    if config.opening_guess is not None:
        return config.opening_guess
    return _best_opener(config.vocabulary, config.workers)


class WordleSolver:
    """Drive one attempt at a time: guess, take feedback, narrow, repeat.

    Usage::

        solver = WordleSolver(config)
        guess = solver.start()
        while guess is not None:
            guess = solver.submit_feedback(ask_user(guess.word))

    The candidate pool and history belong to this instance; call
    :meth:`start` again to begin a fresh attempt.
    """

    def __init__(self, config: SolverConfig) -> None:
        self._config = config
        self._pool = CandidatePool(config.vocabulary)
        self._history: list[tuple[str, str]] = []
        self._rounds: list[ScoredGuess] = []
        self._state = SolverState.AWAITING_FIRST_GUESS

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def start(self) -> ScoredGuess:
        """Reset the attempt and return the opening guess."""
        self._pool.reset()
        self._history = []
        self._rounds = []
        guess = ScoredGuess(word=opening_guess(self._config), pool_size=len(self._pool))
        self._rounds.append(guess)
        self._state = SolverState.AWAITING_FEEDBACK
        return guess

    def submit_feedback(self, pattern: str) -> ScoredGuess | None:
        """Record the feedback for the current guess.

        Returns the next guess, or None once the puzzle is solved.

        Raises
        ------
        MalformedFeedback
            If *pattern* is not a valid X/Y/G string; the state is unchanged.
        EmptyPool
            If no word is consistent with the history; the attempt is over.
        """
        if self._state is not SolverState.AWAITING_FEEDBACK:
            raise RuntimeError(f"no guess is awaiting feedback (state: {self._state.value})")
        pattern = parse_feedback(pattern, self._config.word_length)
        guess = self._rounds[-1].word
        self._history.append((guess, pattern))

        if is_solved(pattern):
            self._state = SolverState.SOLVED
            return None

        try:
            self._pool.remove_inconsistent(guess, pattern)
        except EmptyPool:
            self._state = SolverState.CONTRADICTED
            raise

        nxt = select_guess(
            self._pool.live,
            self._config.popularity,
            popularity_weight=self._config.popularity_weight,
            workers=self._config.workers,
        )
        self._rounds.append(nxt)
        return nxt

    # ------------------------------------------------------------------
    # Whole attempts
    # ------------------------------------------------------------------

    def run(
        self,
        feedback_source: Callable[[str], str],
        on_round: Callable[[ScoredGuess], None] | None = None,
    ) -> AttemptResult:
        """Play one attempt, asking *feedback_source* to judge each guess."""
        guess = self.start()
        while guess is not None:
            if on_round is not None:
                on_round(guess)
            guess = self.submit_feedback(feedback_source(guess.word))
        return self.result()

    def solve(
        self,
        secret: str,
        on_round: Callable[[ScoredGuess], None] | None = None,
    ) -> AttemptResult:
        """Play one attempt against *secret* using the feedback oracle."""
        env = WordleEnv(self._config.vocabulary, word_length=self._config.word_length)
        env.reset(secret)
        return self.run(env.guess, on_round=on_round)

    def result(self) -> AttemptResult:
        if self._state is not SolverState.SOLVED:
            raise RuntimeError(f"attempt is not solved (state: {self._state.value})")
        return AttemptResult(
            num_guesses=len(self._history),
            history=list(self._history),
            rounds=list(self._rounds),
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def state(self) -> SolverState:
        return self._state

    @property
    def solved(self) -> bool:
        return self._state is SolverState.SOLVED

    @property
    def history(self) -> list[tuple[str, str]]:
        return list(self._history)

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._pool.live

    @property
    def config(self) -> SolverConfig:
        return self._config
