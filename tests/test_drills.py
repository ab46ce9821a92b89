import math

import pytest

from numlab.drills import even_squares, evaluate_named, sorted_unique, word_count

WORDS = [
    "and", "i", "will", "show", "you", "something", "different",
    "from", "either", "your", "shadow", "at", "morning", "striding",
    "behind", "you", "or", "your", "shadow", "at", "evening",
    "rising", "to", "meet", "you", "i", "will", "show",
    "you", "fear", "in", "a", "handful", "of", "dust",
]


def test_sorted_unique():
    v = [7, 8, 9, 2, 0, 7, 6, 4, 1, 1, 0, 4, 5, 6, 7, 3]
    assert sorted_unique(v) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_word_count():
    expected = {
        "a": 1, "and": 1, "at": 2, "behind": 1,
        "different": 1, "dust": 1, "either": 1, "evening": 1,
        "fear": 1, "from": 1, "handful": 1, "i": 2,
        "in": 1, "meet": 1, "morning": 1, "of": 1,
        "or": 1, "rising": 1, "shadow": 2, "show": 2,
        "something": 1, "striding": 1, "to": 1, "will": 2,
        "you": 4, "your": 2,
    }
    result = word_count(WORDS)
    assert result == expected
    assert list(result) == sorted(expected)


def test_word_count_totals_match_input_length():
    assert sum(word_count(WORDS).values()) == len(WORDS)


def test_evaluate_named():
    assert evaluate_named(["tan", "sin", "exp"], 0.9) == [
        math.tan(0.9),
        math.sin(0.9),
        math.exp(0.9),
    ]


def test_evaluate_named_unknown_raises():
    with pytest.raises(KeyError):
        evaluate_named(["log"], 0.9)


def test_even_squares():
    assert even_squares(11) == [0, 4, 16, 36, 64, 100]


def test_even_squares_empty():
    assert even_squares(0) == []