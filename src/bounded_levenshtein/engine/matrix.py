from __future__ import annotations

"""Full-matrix Levenshtein variant that can recover the edit script."""

import logging
import math
import operator
import sys
from typing import Any, Callable, List, Optional

import numpy as np

from ..config import UNIT_COSTS, Cost, EditCosts
from ..utils.sequences import as_sequence
from .ops import EditOp

_LG = logging.getLogger(__name__)

Equals = Callable[[Any, Any], bool]


def min_index(c0: Cost, c1: Cost, c2: Cost) -> int:
    """Index of the smallest argument, the earliest one winning ties."""

    if c0 <= c1:
        return 0 if c0 <= c2 else 2
    return 1 if c1 <= c2 else 2


class FullMatrixLevenshtein:
    """Keeps the whole ``(len(s) + 1) x (len(t) + 1)`` table so the path can be rebuilt.

    Rows follow the source, columns the target. There is no early exit.
    """

    def __init__(self, equals: Optional[Equals] = None, costs: Optional[EditCosts] = None) -> None:
        self._equals = equals or operator.eq
        self._costs = costs or UNIT_COSTS
        self._matrix: Optional[np.ndarray] = None

    @property
    def matrix(self) -> Optional[np.ndarray]:
        return self._matrix

    def release(self) -> None:
        self._matrix = None

    def _alloc(self, rows: int, cols: int) -> np.ndarray:
        costs = self._costs
        if rows * cols > sys.maxsize:
            raise OverflowError(f"Cost matrix of {rows}x{cols} cells does not fit in memory")
        if costs.is_integral:
            dtype = np.int64
            highest = (rows - 1) * costs.deletion + (cols - 1) * costs.insertion
            if highest > np.iinfo(dtype).max:
                raise OverflowError(f"Costs up to {highest} overflow a {np.dtype(dtype).name} matrix")
        else:
            dtype = np.float64
        _LG.debug("Allocating %dx%d %s cost matrix", rows, cols, np.dtype(dtype).name)
        matrix = np.zeros((rows, cols), dtype=dtype)
        matrix[:, 0] = np.arange(rows, dtype=dtype) * costs.deletion
        matrix[0, :] = np.arange(cols, dtype=dtype) * costs.insertion
        return matrix

    def distance(self, s: Any, t: Any) -> Cost:
        s = as_sequence(s, name="s")
        t = as_sequence(t, name="t")
        equals = self._equals
        deletion = self._costs.deletion
        insertion = self._costs.insertion
        substitution = self._costs.substitution
        rows, cols = len(s) + 1, len(t) + 1

        matrix = self._alloc(rows, cols)
        previous = matrix[0].tolist()
        for i in range(1, rows):
            source_item = s[i - 1]
            current = [matrix[i, 0].item()] + [0] * (cols - 1)
            for j in range(1, cols):
                cost_sub = previous[j - 1]
                if not equals(source_item, t[j - 1]):
                    cost_sub += substitution
                cost_ins = current[j - 1] + insertion
                cost_del = previous[j] + deletion
                current[j] = (cost_sub, cost_ins, cost_del)[min_index(cost_sub, cost_ins, cost_del)]
            matrix[i] = current
            previous = current
        self._matrix = matrix
        return matrix[-1, -1].item()

    def path(self) -> List[EditOp]:
        """Walk back from the last cell and return the edit script in execution order."""

        if self._matrix is None:
            raise RuntimeError("distance() must be computed before path()")
        table = self._matrix.tolist()
        i = len(table) - 1
        j = len(table[0]) - 1
        result: List[EditOp] = []
        while i or j:
            cost_ins = table[i][j - 1] if j else math.inf
            cost_del = table[i - 1][j] if i else math.inf
            cost_sub = table[i - 1][j - 1] if i and j else math.inf
            choice = min_index(cost_sub, cost_ins, cost_del)
            if choice == 0:
                if table[i - 1][j - 1] == table[i][j]:
                    result.append(EditOp.NONE)
                else:
                    result.append(EditOp.SUBSTITUTE)
                i -= 1
                j -= 1
            elif choice == 1:
                result.append(EditOp.INSERT)
                j -= 1
            else:
                result.append(EditOp.REMOVE)
                i -= 1
        result.reverse()
        return result
