from .bounded import Levenshtein, check_benchmark, length_gap
from .buffer import RowBuffer
from .matrix import FullMatrixLevenshtein, min_index
from .ops import EditOp, apply_edit_path

__all__ = [
    "EditOp",
    "FullMatrixLevenshtein",
    "Levenshtein",
    "RowBuffer",
    "apply_edit_path",
    "check_benchmark",
    "length_gap",
    "min_index",
]
