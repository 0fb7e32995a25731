import pytest

from candidate_pool import EmptyPool
from entropy_engine import expected_information
from lexicon import PopularityModel
from strategy import DEFAULT_OPENING_GUESS, SolverConfig, rank_openers, select_guess

NO_POPULARITY = PopularityModel()


def test_ties_go_to_the_smallest_word():
    for pool in (["abcdf", "abcde"], ["abcde", "abcdf"]):
        best = select_guess(pool, NO_POPULARITY)
        assert best.word == "abcde"
        assert best.entropy == pytest.approx(1.0)


def test_popularity_breaks_entropy_ties():
    popularity = PopularityModel.from_scores({"abcde": 0.1, "abcdf": 0.9})
    best = select_guess(["abcde", "abcdf"], popularity, popularity_weight=0.5)
    assert best.word == "abcdf"
    assert best.popularity == 0.9
    assert best.score == pytest.approx(best.entropy + 0.5 * 0.9)


def test_zero_weight_ignores_popularity():
    popularity = PopularityModel.from_scores({"abcde": 0.0, "abcdf": 1.0})
    assert select_guess(["abcde", "abcdf"], popularity, popularity_weight=0.0).word == "abcde"


def test_entropy_outweighs_small_popularity_bonus():
    pool = ["abcde", "abcdf", "zzzzz"]
    popularity = PopularityModel.from_scores({"zzzzz": 1.0})
    best = select_guess(pool, popularity, popularity_weight=0.1)
    assert best.word == "abcde"
    assert best.pool_size == 3


def test_picks_the_highest_entropy_word(lexicon):
    pool = lexicon.words[:25]
    best = select_guess(pool, lexicon.popularity)
    assert best.entropy == max(expected_information(w, pool) for w in pool)


def test_single_word_pool_is_selectable():
    best = select_guess(["abcdf"], NO_POPULARITY)
    assert best.word == "abcdf"
    assert best.entropy == 0.0
    assert best.pool_size == 1


def test_invalid_inputs():
    with pytest.raises(EmptyPool):
        select_guess([], NO_POPULARITY)
    with pytest.raises(ValueError):
        select_guess(["abcde"], NO_POPULARITY, popularity_weight=-1.0)


def test_rank_openers(lexicon):
    ranked = rank_openers(lexicon.words, top=5)
    assert len(ranked) == 5
    entropies = [h for _, h in ranked]
    assert entropies == sorted(entropies, reverse=True)
    assert ranked[0][1] == max(expected_information(w, lexicon.words) for w in lexicon.words)


def test_default_opener_is_best_for_bundled_dictionary(lexicon):
    assert rank_openers(lexicon.words, top=1)[0][0] == DEFAULT_OPENING_GUESS


@pytest.mark.parametrize("kwargs", [
    {"vocabulary": ()},
    {"vocabulary": ("abcde", "abc")},
    {"popularity_weight": -0.5},
    {"opening_guess": "toolong"},
    {"workers": -1},
])
def test_config_validation(kwargs):
    params = {"vocabulary": ("abcde", "abcdf"), "popularity": NO_POPULARITY}
    params.update(kwargs)
    with pytest.raises(ValueError):
        SolverConfig(**params)
