from __future__ import annotations

"""Public distance functions."""

from typing import Any, Callable, Iterable, List, Optional

from .config import Cost, make_costs
from .engine import EditOp, FullMatrixLevenshtein, Levenshtein
from .engine.ops import apply_edit_path
from .utils.sequences import as_sequence

Equals = Callable[[Any, Any], bool]

__all__ = [
    "apply_edit_path",
    "closest_candidate",
    "distance",
    "distance_bounded",
    "edit_path",
]


def distance(
    s: Any,
    t: Any,
    equals: Optional[Equals] = None,
    deletion_cost: Cost = 1,
    insertion_cost: Cost = 1,
    substitution_cost: Cost = 1,
) -> Cost:
    """Return the exact Levenshtein distance between *s* and *t*.

    Examples:
      distance("kitten", "sitting") == 3
      distance(["a", "b"], ["b"]) == 1
    """

    costs = make_costs(deletion_cost, insertion_cost, substitution_cost)
    return Levenshtein(equals, costs).distance(s, t)


def distance_bounded(
    s: Any,
    t: Any,
    benchmark: Cost,
    equals: Optional[Equals] = None,
    deletion_cost: Cost = 1,
    insertion_cost: Cost = 1,
    substitution_cost: Cost = 1,
) -> Cost:
    """Return the distance if it is below *benchmark*, else some value ``>= benchmark``.

    A result at or above the benchmark only means the distance is no smaller
    than the benchmark; it is not an exact measurement.
    """

    costs = make_costs(deletion_cost, insertion_cost, substitution_cost)
    return Levenshtein(equals, costs).distance(s, t, benchmark)


def edit_path(s: Any, t: Any, equals: Optional[Equals] = None) -> List[EditOp]:
    """Return a minimal unit-cost edit script turning *s* into *t*."""

    engine = FullMatrixLevenshtein(equals)
    engine.distance(s, t)
    try:
        return engine.path()
    finally:
        engine.release()


def closest_candidate(target: Any, candidates: Iterable[Any], equals: Optional[Equals] = None) -> Any:
    """Return the candidate closest to *target*; the first one wins ties.

    Each comparison is bounded by the best distance seen so far, so poor
    candidates are abandoned early.
    """

    target = as_sequence(target, name="target")
    engine = Levenshtein(equals)
    best = None
    best_distance: Optional[Cost] = None
    for candidate in candidates:
        if best_distance is None:
            best, best_distance = candidate, engine.distance(target, candidate)
            continue
        if best_distance == 0:
            break
        found = engine.distance(target, candidate, best_distance)
        if found < best_distance:
            best, best_distance = candidate, found
    if best_distance is None:
        raise ValueError("closest_candidate() needs at least one candidate")
    return best
