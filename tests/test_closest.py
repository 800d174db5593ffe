from __future__ import annotations

import pytest

from bounded_levenshtein import closest_candidate


def test_no_candidates() -> None:
    with pytest.raises(ValueError):
        closest_candidate("", [])


def test_single_candidate() -> None:
    assert closest_candidate("abc", ["abc"]) == "abc"
    assert closest_candidate("abc", ["xyz"]) == "xyz"


def test_exact_match_wins() -> None:
    assert closest_candidate("abc", ["xyz", "jkl", "abcde", "abc"]) == "abc"


def test_nearest_match_wins() -> None:
    assert closest_candidate("abc", ["xyz", "jkl", "abcde", "abq"]) == "abq"


def test_first_of_equal_matches_wins() -> None:
    assert closest_candidate("abc", ["abx", "aby", "ab"]) == "abx"


def test_custom_equality_and_generators() -> None:
    def same_letter(a: str, b: str) -> bool:
        return a.lower() == b.lower()

    candidates = (word for word in ["Michigan", "Minnesota", "MICHIGAN"])
    assert closest_candidate(iter("michigan"), candidates, same_letter) == "Michigan"
