"""Errors raised by mapfold itself.

Exceptions raised by caller-supplied callbacks are never wrapped in these
classes; they reach the caller exactly as raised.
"""

__all__ = [
    "MapFoldError",
    "EmptyInputError",
]


class MapFoldError(Exception):
    """Base class for every error raised by mapfold."""


class EmptyInputError(MapFoldError, TypeError):
    """Raised when reducing an empty sequence without a seed.

    Also a ``TypeError`` so code written against ``functools.reduce`` keeps
    catching it.
    """

    def __init__(self, message: str = "reduce() of empty sequence with no seed"):
        super().__init__(message)
