from __future__ import annotations

"""Helpers for turning caller input into trimmed, indexable sequences."""

from collections.abc import Iterable, Sequence
from typing import Any, Callable, Tuple

from ..config import PreconditionError

Equals = Callable[[Any, Any], bool]


def as_sequence(items: Any, *, name: str = "sequence") -> Sequence:
    """Return *items* as something that supports ``len`` and indexing.

    Sequences are used as-is; other iterables are read once into a tuple.
    """

    if items is None:
        raise PreconditionError(f"{name} must not be None")
    if isinstance(items, Sequence):
        return items
    if isinstance(items, Iterable):
        return tuple(items)
    raise PreconditionError(f"{name} must be iterable, got {type(items).__name__}")


def trim_common(s: Sequence, t: Sequence, equals: Equals) -> Tuple[int, int, int]:
    """Return ``(start, s_stop, t_stop)`` bounding the part of *s* and *t* that differs.

    Matching leading items are skipped first, then matching trailing items,
    without ever crossing *start*.
    """

    s_stop, t_stop = len(s), len(t)
    start = 0
    limit = min(s_stop, t_stop)
    while start < limit and equals(s[start], t[start]):
        start += 1
    while s_stop > start and t_stop > start and equals(s[s_stop - 1], t[t_stop - 1]):
        s_stop -= 1
        t_stop -= 1
    return start, s_stop, t_stop


def window(items: Sequence, start: int, stop: int) -> Sequence:
    """Return ``items[start:stop]``, copying item by item for sequences without slicing."""

    if start == 0 and stop == len(items):
        return items
    if isinstance(items, (str, bytes, list, tuple, range)):
        return items[start:stop]
    return tuple(items[i] for i in range(start, stop))
