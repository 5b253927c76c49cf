"""Generic map and reduce built on callbacks instead of hand-written loops."""

from mapfold.core.exceptions import EmptyInputError, MapFoldError
from mapfold.core.types import MISSING
from mapfold.functional.sequence import map, reduce

__all__ = [
    "map",
    "reduce",
    "MISSING",
    "EmptyInputError",
    "MapFoldError",
]
