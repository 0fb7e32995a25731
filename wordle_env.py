"""Wordle environment: feedback oracle, feedback parsing and game state."""

from __future__ import annotations

from typing import Iterable


# Feedback encoding (one character per position):
# G = green  (correct letter, correct position)
# Y = yellow (correct letter, wrong position)
# X = grey   (letter not present, or already consumed by greens/yellows)
GREEN = "G"
YELLOW = "Y"
GREY = "X"
VERDICTS = frozenset((GREEN, YELLOW, GREY))

# Marks a target letter that has already been matched.
_CONSUMED = "#"


class MalformedFeedback(ValueError):
    """Feedback string of the wrong length or outside the X/Y/G alphabet."""


def feedback(guess: str, target: str) -> str:
    """Return the feedback pattern for *guess* played against *target*.

    Greens are assigned first and consume their target letter; each
    remaining guess letter is then yellow only if an unconsumed copy is
    still left in the target, and consumes it.
    """
    n = len(target)
    if len(guess) != n:
        raise ValueError(
            f"guess length ({len(guess)}) != target length ({n})"
        )

    scratch = list(target)
    pat = [GREY] * n

    # Pass 1 – greens
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pat[i] = GREEN
            scratch[i] = _CONSUMED

    # Pass 2 – yellows
    for i, g in enumerate(guess):
        if pat[i] == GREEN:
            continue
        try:
            j = scratch.index(g)
        except ValueError:
            continue
        pat[i] = YELLOW
        scratch[j] = _CONSUMED

    return "".join(pat)


def solved_pattern(word_length: int) -> str:
    return GREEN * word_length


def is_solved(pattern: str) -> bool:
    return bool(pattern) and pattern == solved_pattern(len(pattern))


def parse_feedback(text: str, word_length: int) -> str:
    """Validate a feedback string typed by a user (e.g. ``"xyygx"``).

    Raises
    ------
    MalformedFeedback
        If the string does not have exactly *word_length* characters drawn
        from ``X``, ``Y`` and ``G``.
    """
    pattern = text.strip().upper()
    if len(pattern) != word_length:
        raise MalformedFeedback(
            f"feedback {text!r} has length {len(pattern)}, expected {word_length}"
        )
    bad = sorted(set(pattern) - VERDICTS)
    if bad:
        raise MalformedFeedback(
            f"feedback {text!r} contains {''.join(bad)!r}; use only X, Y and G"
        )
    return pattern


def filter_candidates(
    candidates: Iterable[str],
    guess: str,
    pattern: str,
) -> list[str]:
    """Keep only candidates consistent with the observed *pattern*."""
    return [w for w in candidates if feedback(guess, w) == pattern]


class WordleEnv:
    """A single Wordle game that answers guesses with oracle feedback.

    Parameters
    ----------
    vocabulary : list[str]
        Valid words (all must have the same length).
    word_length : int
        Expected word length (validated against vocabulary).

    The game ends when the secret is guessed; there is no guess limit.
    """

    def __init__(
        self,
        vocabulary: Iterable[str],
        word_length: int = 5,
    ) -> None:
        vocab = list(vocabulary)
        bad = [w for w in vocab if len(w) != word_length]
        if bad:
            raise ValueError(
                f"Words with wrong length (expected {word_length}): {bad[:5]}"
            )
        self._word_length = word_length
        self._vocab_set = set(vocab)

        # Game state (set by reset)
        self._secret: str | None = None
        self._solved = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset(self, secret: str) -> None:
        """Start a new game against *secret*."""
        secret = secret.strip().lower()
        if secret not in self._vocab_set:
            raise ValueError(f"secret {secret!r} is not in vocabulary")
        self._secret = secret
        self._solved = False

    def guess(self, word: str) -> str:
        """Submit a guess and receive its feedback pattern.

        Raises
        ------
        RuntimeError
            If no game is in progress or the secret was already found.
        ValueError
            If *word* has the wrong length.
        """
        if self._secret is None:
            raise RuntimeError("Call reset() before guessing")
        if self._solved:
            raise RuntimeError("Game is already over")
        word = word.lower()
        if len(word) != self._word_length:
            raise ValueError(
                f"Guess length ({len(word)}) != word_length ({self._word_length})"
            )

        pat = feedback(word, self._secret)
        if word == self._secret:
            self._solved = True
        return pat

