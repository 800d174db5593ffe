from __future__ import annotations

import random
from typing import Callable, List, Sequence

import pytest


def _naive_distance(
    s: Sequence, t: Sequence, deletion: float = 1, insertion: float = 1, substitution: float = 1
) -> float:
    table: List[List[float]] = [[0] * (len(t) + 1) for _ in range(len(s) + 1)]
    for i in range(len(s) + 1):
        table[i][0] = i * deletion
    for j in range(len(t) + 1):
        table[0][j] = j * insertion
    for i in range(1, len(s) + 1):
        for j in range(1, len(t) + 1):
            cost = 0 if s[i - 1] == t[j - 1] else substitution
            table[i][j] = min(
                table[i - 1][j] + deletion,
                table[i][j - 1] + insertion,
                table[i - 1][j - 1] + cost,
            )
    return table[-1][-1]


@pytest.fixture
def naive_distance() -> Callable[..., float]:
    return _naive_distance


@pytest.fixture
def word_pairs() -> List[tuple[str, str]]:
    rng = random.Random(7)
    pairs = []
    for _ in range(150):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
        pairs.append((a, b))
    # skewed lengths exercise the length-gap arithmetic
    pairs += [("a", "bbbbb"), ("bbbbb", "a"), ("ab", "bbbbbbba"), ("xyz", "")]
    return pairs
