from __future__ import annotations

"""Edit operations and replaying edit scripts."""

from enum import Enum
from typing import Any, Iterable, List

from ..utils.sequences import as_sequence


class EditOp(str, Enum):
    """One step of an edit script turning a source into a target."""

    NONE = "n"
    SUBSTITUTE = "s"
    INSERT = "i"
    REMOVE = "r"


def apply_edit_path(path: Iterable[EditOp], source: Any, target: Any) -> List[Any]:
    """Replay *path* against *source*, taking inserted and substituted items from *target*.

    Returns the rebuilt target as a list.
    """

    source = as_sequence(source, name="source")
    target = as_sequence(target, name="target")
    result: List[Any] = []
    i = j = 0
    for op in path:
        op = EditOp(op)
        if op is EditOp.INSERT:
            if j >= len(target):
                raise ValueError("Edit path inserts past the end of the target")
            result.append(target[j])
            j += 1
            continue
        if i >= len(source):
            raise ValueError(f"Edit path consumes past the end of the source at {op.name}")
        if op is not EditOp.REMOVE:
            if j >= len(target):
                raise ValueError(f"Edit path consumes past the end of the target at {op.name}")
            result.append(source[i] if op is EditOp.NONE else target[j])
            j += 1
        i += 1
    if i != len(source) or j != len(target):
        raise ValueError(
            f"Edit path covers {i}/{len(source)} source and {j}/{len(target)} target items"
        )
    return result
