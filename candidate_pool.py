"""Candidate pool: the words still consistent with the feedback seen so far."""

from __future__ import annotations

from typing import Iterable, Iterator

from wordle_env import feedback


class EmptyPool(RuntimeError):
    """Filtering removed every word: the feedback history is contradictory."""


class CandidatePool:
    """Fixed array of words split into a live front and an eliminated back.

    Words are never inserted after construction.  Filtering swaps an
    eliminated word with the last live one and shrinks the live count,
    so one pass needs no extra storage.  :meth:`reset` makes every word
    live again for a new attempt.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)
        if not self._words:
            raise ValueError("a candidate pool needs at least one word")
        self._live = len(self._words)

    def reset(self) -> None:
        self._live = len(self._words)

    def __len__(self) -> int:
        return self._live

    def __iter__(self) -> Iterator[str]:
        return iter(self._words[:self._live])

    def __contains__(self, word: object) -> bool:
        return word in self._words[:self._live]

    @property
    def capacity(self) -> int:
        return len(self._words)

    @property
    def live(self) -> tuple[str, ...]:
        """Snapshot of the live words, safe to hand to worker processes."""
        return tuple(self._words[:self._live])

    def remove_inconsistent(self, guess: str, pattern: str) -> int:
        """Drop *guess* and every word that would not have produced *pattern*.

        Returns the number of words removed.

        Raises
        ------
        EmptyPool
            If no live word survives.
        """
        if len(pattern) != len(guess):
            raise ValueError(
                f"pattern length ({len(pattern)}) != guess length ({len(guess)})"
            )
        words = self._words
        before = self._live
        i = 0
        while i < self._live:
            word = words[i]
            if word == guess or feedback(guess, word) != pattern:
                # Re-examine slot i: the last live word moves into it.
                self._live -= 1
                words[i], words[self._live] = words[self._live], words[i]
            else:
                i += 1

        if self._live == 0:
            raise EmptyPool(
                f"no candidate is consistent with {guess!r} -> {pattern!r}"
            )
        return before - self._live
