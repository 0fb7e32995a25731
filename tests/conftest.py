from __future__ import annotations

import pytest

from lexicon import PopularityModel, load_lexicon
from strategy import SolverConfig

TINY_VOCAB = ("abcde", "abcdf", "zzzzz")


@pytest.fixture(scope="session")
def lexicon():
    return load_lexicon()


@pytest.fixture
def tiny_config() -> SolverConfig:
    return SolverConfig(
        vocabulary=TINY_VOCAB,
        popularity=PopularityModel.from_scores({w: 0.0 for w in TINY_VOCAB}),
        popularity_weight=0.0,
        opening_guess="abcde",
    )


@pytest.fixture
def full_config(lexicon) -> SolverConfig:
    return SolverConfig(
        vocabulary=tuple(lexicon.words),
        popularity=lexicon.popularity,
    )
