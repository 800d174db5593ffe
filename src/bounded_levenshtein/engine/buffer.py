from __future__ import annotations

"""Growth-only scratch row reused across distance calls."""

import logging
import sys
from typing import List

from ..config import Cost

_LG = logging.getLogger(__name__)


class RowBuffer:
    """Owned list of costs that only ever grows.

    Not safe to share between threads; give each thread its own engine.
    """

    def __init__(self) -> None:
        self._cells: List[Cost] = []

    def __len__(self) -> int:
        return len(self._cells)

    def ensure_capacity(self, size: int) -> List[Cost]:
        """Make room for at least *size* cells and return the backing list."""

        if size < 0:
            raise ValueError(f"Buffer size must be non-negative, got {size}")
        if size > sys.maxsize:
            raise OverflowError(f"Row buffer of {size} cells does not fit in memory")
        missing = size - len(self._cells)
        if missing > 0:
            _LG.debug("Growing row buffer from %d to %d cells", len(self._cells), size)
            self._cells.extend([0] * missing)
        return self._cells

    def release(self) -> None:
        self._cells = []
