"""Bounded Levenshtein distance package."""
from importlib.metadata import version, PackageNotFoundError

from .api import (
    apply_edit_path,
    closest_candidate,
    distance,
    distance_bounded,
    edit_path,
)
from .config import UNIT_COSTS, EditCosts, PreconditionError, load_costs
from .engine import EditOp, FullMatrixLevenshtein, Levenshtein

try:
    __version__ = version("bounded-levenshtein")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "EditCosts",
    "EditOp",
    "FullMatrixLevenshtein",
    "Levenshtein",
    "PreconditionError",
    "UNIT_COSTS",
    "apply_edit_path",
    "closest_candidate",
    "distance",
    "distance_bounded",
    "edit_path",
    "load_costs",
]
