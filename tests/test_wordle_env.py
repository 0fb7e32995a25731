import itertools

import pytest

from wordle_env import (
    MalformedFeedback,
    WordleEnv,
    feedback,
    filter_candidates,
    is_solved,
    parse_feedback,
    solved_pattern,
)


def test_repeated_letter_is_not_double_counted():
    assert feedback("eerie", "merit") == "XGGGX"


@pytest.mark.parametrize("guess,target,expected", [
    ("crane", "react", "YYGXY"),
    ("geese", "lever", "XGYXX"),
    ("speed", "abide", "XXYXY"),
    ("sassy", "stare", "GYXXX"),
    ("abcde", "abcdf", "GGGGX"),
    ("zzzzz", "abcde", "XXXXX"),
])
def test_known_patterns(guess, target, expected):
    assert feedback(guess, target) == expected


def test_distinct_letters_follow_simple_rule(lexicon):
    distinct = [w for w in lexicon.words if len(set(w)) == len(w)][:40]
    for g, t in itertools.product(distinct, repeat=2):
        expected = "".join(
            "G" if g[i] == t[i] else "Y" if g[i] in t else "X"
            for i in range(len(g))
        )
        assert feedback(g, t) == expected


def test_self_match_is_all_green(lexicon):
    for w in lexicon.words:
        assert feedback(w, w) == "GGGGG"


def test_length_mismatch():
    with pytest.raises(ValueError):
        feedback("abcd", "abcde")


def test_parse_feedback_normalizes():
    assert parse_feedback(" xyYgG\n", 5) == "XYYGG"


@pytest.mark.parametrize("text", ["XYG", "XYYGGG", "XYZGG", "", "x y g"])
def test_parse_feedback_rejects_malformed(text):
    with pytest.raises(MalformedFeedback):
        parse_feedback(text, 5)


def test_malformed_feedback_is_a_value_error():
    assert issubclass(MalformedFeedback, ValueError)


def test_solved_pattern():
    assert solved_pattern(5) == "GGGGG"
    assert is_solved(solved_pattern(7))
    assert is_solved("GGGGG")
    assert not is_solved("GGGGY")
    assert not is_solved("")


def test_filter_candidates():
    words = ["abcde", "abcdf", "zzzzz"]
    assert filter_candidates(words, "abcde", "GGGGX") == ["abcdf"]


def test_env_plays_a_game():
    env = WordleEnv(["abcde", "abcdf", "zzzzz"])
    env.reset("abcdf")
    assert env.guess("ABCDE") == "GGGGX"
    assert env.guess("abcdf") == "GGGGG"
    with pytest.raises(RuntimeError):
        env.guess("zzzzz")


def test_env_rejects_unknown_secret_and_bad_guess():
    env = WordleEnv(["abcde"])
    with pytest.raises(ValueError):
        env.reset("qqqqq")
    env.reset("abcde")
    with pytest.raises(ValueError):
        env.guess("abc")


def test_env_has_no_guess_limit():
    env = WordleEnv(["abcde", "zzzzz"])
    env.reset("abcde")
    for _ in range(20):
        assert env.guess("zzzzz") == "XXXXX"
    assert env.guess("abcde") == "GGGGG"


def test_env_reset_starts_a_new_game():
    env = WordleEnv(["abcde", "zzzzz"])
    env.reset("abcde")
    env.guess("abcde")
    env.reset("zzzzz")
    assert env.guess("abcde") == "XXXXX"


def test_env_requires_reset():
    env = WordleEnv(["abcde"])
    with pytest.raises(RuntimeError):
        env.guess("abcde")


def test_env_rejects_wrong_length_vocabulary():
    with pytest.raises(ValueError):
        WordleEnv(["abcde", "abc"])
