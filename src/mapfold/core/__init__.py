"""Core types, errors and settings shared by the functional primitives."""

from mapfold.core.exceptions import EmptyInputError, MapFoldError
from mapfold.core.types import MISSING, Combine, Transform

__all__ = [
    "MISSING",
    "Transform",
    "Combine",
    "EmptyInputError",
    "MapFoldError",
]
