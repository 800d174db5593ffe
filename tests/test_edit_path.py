from __future__ import annotations

import numpy as np
import pytest

from bounded_levenshtein import (
    EditCosts,
    EditOp,
    FullMatrixLevenshtein,
    apply_edit_path,
    distance,
    edit_path,
)

N, S, I, R = EditOp.NONE, EditOp.SUBSTITUTE, EditOp.INSERT, EditOp.REMOVE


def test_path_for_single_substitution() -> None:
    assert edit_path("cat", "rat") == [S, N, N]


def test_path_for_empty_sides() -> None:
    assert edit_path("", "") == []
    assert edit_path("", "ab") == [I, I]
    assert edit_path("ab", "") == [R, R]


def test_path_round_trip(word_pairs) -> None:
    for s, t in word_pairs + [("kitten", "sitting"), ("parks", "spark")]:
        path = edit_path(s, t)
        assert "".join(apply_edit_path(path, s, t)) == t, (s, t, path)
        assert sum(op is not N for op in path) == distance(s, t), (s, t)


def test_path_over_word_lists() -> None:
    s = ["the", "cat", "sat"]
    t = ["the", "dog", "sat", "down"]
    path = edit_path(s, t)
    assert path == [N, S, N, I]
    assert apply_edit_path(path, s, t) == t


def test_edit_ops_accept_tag_values() -> None:
    assert apply_edit_path(["s", "n", "n"], "cat", "rat") == list("rat")
    assert EditOp("r") is R


@pytest.mark.parametrize(
    "path",
    [
        [N, N],
        [N, N, N, I],
        [I, I, I, I],
        [R, R, R, R],
    ],
)
def test_apply_rejects_ill_fitting_paths(path) -> None:
    with pytest.raises(ValueError):
        apply_edit_path(path, "cat", "rat")


def test_path_requires_distance_first() -> None:
    with pytest.raises(RuntimeError):
        FullMatrixLevenshtein().path()


def test_matrix_keeps_whole_table() -> None:
    engine = FullMatrixLevenshtein()
    assert engine.distance("kitten", "sitting") == 3
    assert engine.matrix.shape == (7, 8)
    assert engine.matrix.dtype == np.int64
    assert list(engine.matrix[0]) == list(range(8))
    engine.release()
    assert engine.matrix is None


def test_weighted_matrix(word_pairs, naive_distance) -> None:
    engine = FullMatrixLevenshtein(costs=EditCosts(deletion=0.5, insertion=2, substitution=1))
    for s, t in word_pairs[:30]:
        assert engine.distance(s, t) == pytest.approx(naive_distance(s, t, 0.5, 2, 1))
    assert engine.matrix.dtype == np.float64


def test_matrix_refuses_costs_that_overflow() -> None:
    huge = EditCosts(deletion=2**62, insertion=2**62)
    with pytest.raises(OverflowError):
        FullMatrixLevenshtein(costs=huge).distance("abc", "abc")
