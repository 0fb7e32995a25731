"""Word-list loading and the popularity model (self-contained).

Supports three formats:
  - JSON object ``{"word": raw_popularity, ...}`` (``data/word_freq.json``)
  - CSV with header ``word,count``
  - Plain text: one word per line (every word gets the same count)

Raw counts are turned into popularity scores in [0, 1] by a sigmoid of the
log-count.  JSON files whose values already are scores can be loaded with
``prescored=True``.
"""

from __future__ import annotations

import csv
import json
import math
import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


_DIR = Path(__file__).resolve().parent
DEFAULT_WORDS_PATH = _DIR / "data" / "word_freq.json"

DEFAULT_STEEPNESS = 1.0


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


# ------------------------------------------------------------------
# Sigmoid weighting
# ------------------------------------------------------------------

def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    ex = math.exp(x)
    return ex / (1.0 + ex)


def popularity_scores(
    raw_counts: Mapping[str, float],
    offset: float | None = None,
    steepness: float = DEFAULT_STEEPNESS,
) -> dict[str, float]:
    """Map raw counts to [0,1] via a sigmoid on the log-count.

    ``score = sigmoid(steepness * (ln(count + 1) - offset))``.  When
    *offset* is None the mean log-count of *raw_counts* is used, so a word
    of average frequency scores 0.5.
    """
    if not raw_counts:
        return {}
    log_counts = {}
    for w, c in raw_counts.items():
        if not math.isfinite(c):
            raise ValueError(f"raw popularity for {w!r} is not finite: {c}")
        if c < 0:
            raise ValueError(f"raw popularity for {w!r} is negative: {c}")
        log_counts[w] = math.log(c + 1)
    if offset is None:
        offset = sum(log_counts.values()) / len(log_counts)
    return {w: _sigmoid(steepness * (lc - offset)) for w, lc in log_counts.items()}


# ------------------------------------------------------------------
# Popularity model
# ------------------------------------------------------------------

@dataclass(frozen=True)
class PopularityModel:
    """Read-only word -> popularity score mapping, scores in [0, 1]."""
    scores: Mapping[str, float] = field(default_factory=dict)

    @classmethod
    def from_raw(
        cls,
        raw_counts: Mapping[str, float],
        offset: float | None = None,
        steepness: float = DEFAULT_STEEPNESS,
    ) -> "PopularityModel":
        return cls(popularity_scores(raw_counts, offset=offset, steepness=steepness))

    @classmethod
    def from_scores(cls, scores: Mapping[str, float]) -> "PopularityModel":
        """Wrap already-transformed scores, checking that they lie in [0, 1]."""
        for w, s in scores.items():
            if not 0.0 <= s <= 1.0:
                raise ValueError(f"popularity score for {w!r} outside [0, 1]: {s}")
        return cls(dict(scores))

    def score(self, word: str) -> float:
        # Unknown words have no popularity.
        return self.scores.get(word, 0.0)

    def __contains__(self, word: object) -> bool:
        return word in self.scores

    def __len__(self) -> int:
        return len(self.scores)


@dataclass
class Lexicon:
    """A word list with its popularity model."""
    words: list[str]
    popularity: PopularityModel


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _word_pattern(word_length: int) -> re.Pattern:
    return re.compile(rf"^[a-z]{{{word_length}}}$")


def _normalize(raw: str) -> str:
    return _strip_accents(raw.strip().lower())


def _load_txt(path: Path, word_length: int) -> dict[str, float]:
    """Load plain-text word list (one word per line). Counts are all 1."""
    pattern = _word_pattern(word_length)
    counts: dict[str, float] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        w = _normalize(raw)
        if pattern.match(w):
            counts.setdefault(w, 1.0)
    return counts


def _load_csv(path: Path, word_length: int) -> dict[str, float]:
    """Load CSV with ``word,count`` header."""
    pattern = _word_pattern(word_length)
    counts: dict[str, float] = {}
    with path.open("r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or not {"word", "count"} <= set(reader.fieldnames):
            raise ValueError(f"{path}: expected a 'word,count' header")
        for row in reader:
            w = _normalize(row["word"])
            if w in counts or not pattern.match(w):
                continue
            counts[w] = float(row["count"])
    return counts


def _load_json(path: Path, word_length: int) -> dict[str, float]:
    """Load a JSON object mapping word -> popularity value."""
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of word -> number")
    pattern = _word_pattern(word_length)
    counts: dict[str, float] = {}
    for raw, value in data.items():
        w = _normalize(raw)
        if w in counts or not pattern.match(w):
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{path}: value for {raw!r} is not a number")
        counts[w] = float(value)
    return counts


def load_lexicon(
    path: str | Path | None = None,
    word_length: int = 5,
    prescored: bool = False,
    log_offset: float | None = None,
    steepness: float = DEFAULT_STEEPNESS,
) -> Lexicon:
    """Load words and build their popularity model.

    Parameters
    ----------
    path : str, Path or None
        ``.json``, ``.csv`` or ``.txt`` word list.  None falls back to
        ``data/word_freq.json``.
    word_length : int
        Only keep words of this exact length.
    prescored : bool
        If True, the file's values are used as popularity scores as-is
        (they must lie in [0, 1]) instead of being transformed.
    log_offset, steepness : float
        Parameters of the log-count sigmoid, see :func:`popularity_scores`.

    Returns
    -------
    Lexicon
    """
    src = Path(path) if path is not None else DEFAULT_WORDS_PATH
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    if src.suffix == ".json":
        counts = _load_json(src, word_length)
    elif src.suffix == ".csv":
        counts = _load_csv(src, word_length)
    else:
        counts = _load_txt(src, word_length)

    if not counts:
        raise ValueError(f"No {word_length}-letter words found in {src}")

    if prescored:
        popularity = PopularityModel.from_scores(counts)
    else:
        popularity = PopularityModel.from_raw(counts, offset=log_offset, steepness=steepness)

    return Lexicon(words=sorted(counts), popularity=popularity)
