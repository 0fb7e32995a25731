import pytest

from candidate_pool import CandidatePool, EmptyPool
from wordle_env import feedback, filter_candidates


def test_filtering_keeps_exactly_the_consistent_words(lexicon):
    for guess, secret in [("crane", "merit"), ("about", "house"), ("geese", "lever")]:
        pool = CandidatePool(lexicon.words)
        pattern = feedback(guess, secret)
        removed = pool.remove_inconsistent(guess, pattern)

        live = set(pool)
        assert live == set(filter_candidates(lexicon.words, guess, pattern)) - {guess}
        assert secret in live
        assert removed == pool.capacity - len(pool)
        for w in lexicon.words:
            if w not in live:
                assert w == guess or feedback(guess, w) != pattern


def test_guess_itself_is_removed():
    pool = CandidatePool(["abcde", "abcdf", "zzzzz"])
    pool.remove_inconsistent("zzzzz", "XXXXX")
    assert set(pool.live) == {"abcde", "abcdf"}
    assert "zzzzz" not in pool


def test_end_to_end_filter():
    pool = CandidatePool(["abcde", "abcdf", "zzzzz"])
    assert pool.remove_inconsistent("abcde", "GGGGX") == 2
    assert pool.live == ("abcdf",)


def test_pool_shrinks_round_over_round(lexicon):
    pool = CandidatePool(lexicon.words)
    secret = "water"
    sizes = [len(pool)]
    for guess in ["corms", "plant", "later", "water"]:
        if guess == secret:
            break
        pool.remove_inconsistent(guess, feedback(guess, secret))
        sizes.append(len(pool))
    assert sizes == sorted(sizes, reverse=True)
    assert "water" in pool


def test_contradiction_raises_empty_pool():
    pool = CandidatePool(["abcde", "abcdf", "zzzzz"])
    with pytest.raises(EmptyPool):
        pool.remove_inconsistent("abcde", "YYYYY")
    assert len(pool) == 0


def test_reset_restores_every_word():
    words = ["abcde", "abcdf", "zzzzz"]
    pool = CandidatePool(words)
    pool.remove_inconsistent("abcde", "GGGGX")
    pool.reset()
    assert sorted(pool) == words
    assert len(pool) == pool.capacity == 3


def test_pattern_length_must_match():
    pool = CandidatePool(["abcde"])
    with pytest.raises(ValueError):
        pool.remove_inconsistent("abcde", "GGG")


def test_needs_words():
    with pytest.raises(ValueError):
        CandidatePool([])
