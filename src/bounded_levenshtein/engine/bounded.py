from __future__ import annotations

"""Row-wise Levenshtein engine with benchmark-driven early exit."""

import logging
import math
import numbers
import operator
from typing import Any, Callable, Optional, Sequence

from ..config import UNIT_COSTS, Cost, EditCosts, PreconditionError
from ..utils.sequences import as_sequence, trim_common, window
from .buffer import RowBuffer

_LG = logging.getLogger(__name__)

Equals = Callable[[Any, Any], bool]


def check_benchmark(benchmark: Optional[Cost]) -> None:
    if benchmark is None:
        return
    if not isinstance(benchmark, numbers.Real) or isinstance(benchmark, bool):
        raise PreconditionError(f"benchmark must be a number, got {benchmark!r}")
    if math.isnan(benchmark) or benchmark < 0:
        raise PreconditionError(f"benchmark must be non-negative, got {benchmark!r}")


def length_gap(slen: int, tlen: int, costs: EditCosts) -> Cost:
    """Cost that the length difference alone forces on any edit script."""

    if tlen >= slen:
        return (tlen - slen) * costs.insertion
    return (slen - tlen) * costs.deletion


class Levenshtein:
    """Computes edit distances, reusing one row buffer across calls.

    An instance is not thread-safe: concurrent callers each need their own.
    """

    def __init__(self, equals: Optional[Equals] = None, costs: Optional[EditCosts] = None) -> None:
        self._equals = equals or operator.eq
        self._costs = costs or UNIT_COSTS
        self._swapped_costs = self._costs.swapped()
        self._buffer = RowBuffer()

    @property
    def equals(self) -> Equals:
        return self._equals

    @property
    def costs(self) -> EditCosts:
        return self._costs

    def release(self) -> None:
        """Drop the scratch row; the next call allocates a fresh one."""

        self._buffer.release()

    def distance(self, s: Any, t: Any, benchmark: Optional[Cost] = None) -> Cost:
        """Return the edit distance from *s* to *t*.

        Without a benchmark the result is exact. With one, the result is exact
        when it is below the benchmark; otherwise it is some value that is at
        least the benchmark and must be read as "no closer than benchmark".
        """

        s = as_sequence(s, name="s")
        t = as_sequence(t, name="t")
        check_benchmark(benchmark)
        costs = self._costs
        equals = self._equals

        slen, tlen = len(s), len(t)
        gap = length_gap(slen, tlen, costs)
        if benchmark is None:
            benchmark = slen * costs.deletion + tlen * costs.insertion
        if benchmark < gap:
            _LG.debug("Length gap %s already exceeds benchmark %s", gap, benchmark)
            return gap

        start, s_stop, t_stop = trim_common(s, t, equals)
        s_rest = s_stop - start
        t_rest = t_stop - start
        if s_rest == 0:
            return t_rest * costs.insertion
        if t_rest == 0:
            return s_rest * costs.deletion
        if s_rest == 1 and t_rest == 1:
            # trimming leaves two differing items
            return min(costs.substitution, costs.deletion + costs.insertion)

        s = window(s, start, s_stop)
        t = window(t, start, t_stop)
        if s_rest <= t_rest:
            return self._scan(s, t, equals, costs, benchmark - gap, gap)
        # swap roles; the predicate still sees (item of s, item of t)
        return self._scan(
            t,
            s,
            lambda a, b: equals(b, a),
            self._swapped_costs,
            benchmark - gap,
            gap,
        )

    def _scan(
        self,
        short: Sequence,
        long_: Sequence,
        equals: Equals,
        costs: EditCosts,
        budget: Cost,
        gap: Cost,
    ) -> Cost:
        """Fill the DP table one row per item of *long_*.

        The row is indexed by *short*, so it holds ``len(short) + 1`` cells.
        Walking along *short* deletes, walking along *long_* inserts.
        Returns early once a finished row proves the distance is at least
        ``budget + gap``.
        """

        rows = len(short)
        cols = len(long_)
        deletion = costs.deletion
        insertion = costs.insertion
        substitution = costs.substitution
        surplus = cols - rows

        row = self._buffer.ensure_capacity(rows + 1)
        for y in range(rows + 1):
            row[y] = y * deletion
        # row 0 bounds the distance by the gap alone
        if budget <= 0:
            _LG.debug("Benchmark reached before scanning: %s", gap)
            return gap

        for x in range(1, cols + 1):
            target_item = long_[x - 1]
            last_diagonal = row[0]
            row[0] = x * insertion
            # unavoidable indel cost left after cell (x, y) is driven by k
            k = surplus - x
            floor = row[0] + (k * insertion if k >= 0 else -k * deletion)
            for y in range(1, rows + 1):
                above = row[y]
                if equals(short[y - 1], target_item):
                    cost_sub = last_diagonal
                else:
                    cost_sub = last_diagonal + substitution
                cost_left = row[y - 1] + deletion
                cost_up = above + insertion
                if cost_sub <= cost_left:
                    best = cost_sub if cost_sub <= cost_up else cost_up
                else:
                    best = cost_left if cost_left <= cost_up else cost_up
                row[y] = best
                last_diagonal = above

                k += 1
                bound = best + (k * insertion if k >= 0 else -k * deletion)
                if bound < floor:
                    floor = bound

            excess = floor - gap
            if excess >= budget:
                _LG.debug("Pruned at row %d of %d with lower bound %s", x, cols, floor)
                return excess + gap
        return row[rows]
