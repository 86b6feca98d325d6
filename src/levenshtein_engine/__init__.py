from .engine import DistanceOverflowError, bounded_levenshtein, levenshtein
from .distance import (
    check_edit_distance,
    compute_edit_distance,
    create_edit_distance,
    to_units,
)
from .types import U32_MAX, UnitSequences

__version__ = "0.1.0"
__all__ = [
    "DistanceOverflowError",
    "U32_MAX",
    "UnitSequences",
    "bounded_levenshtein",
    "check_edit_distance",
    "compute_edit_distance",
    "create_edit_distance",
    "levenshtein",
    "to_units",
]
