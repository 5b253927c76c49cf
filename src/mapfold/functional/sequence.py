"""Generic map and left fold over ordered sequences.

The loop every caller would otherwise write by hand lives here once; the
part that changes from call to call is passed in as a callback.

Examples:
    >>> from mapfold.functional.sequence import map, reduce
    >>>
    >>> map([1, 2, 3, -9], lambda n: n * -1)
    [-1, -2, -3, 9]
    >>>
    >>> reduce([1, 2, 3], lambda memo, n: memo + n)
    6
    >>> reduce([1, 2, 3], lambda memo, n: memo + n, seed=100)
    106
"""

import typing as tp

from mapfold.core.exceptions import EmptyInputError
from mapfold.core.types import MISSING, A, Combine, T, Transform, U
from mapfold.logger.logger import logger

__all__ = [
    "map",
    "reduce",
]


def map(sequence: tp.Sequence[T], transform: Transform[T, U]) -> tp.List[U]:
    """Apply ``transform`` to every element of ``sequence``.

    Args:
        sequence: Ordered, indexable input. It is never mutated.
        transform: Unary callback invoked once per element, in index order.

    Returns:
        A new list where element ``i`` is ``transform(sequence[i])``. An empty
        input gives an empty list without calling ``transform``.

    Raises:
        Whatever ``transform`` raises, unchanged. Elements after the failing
        one are not visited.
    """
    logger.debug("map over %d element(s)", len(sequence))

    result = []
    for i in range(len(sequence)):
        result.append(transform(sequence[i]))
    return result


def reduce(
    sequence: tp.Sequence[T],
    combine: Combine[A, T],
    seed: A = MISSING,
) -> A:
    """Fold ``sequence`` into a single value, left to right.

    With a seed every element is folded into it. Without one, the first
    element becomes the accumulator and folding starts at the second.

    Args:
        sequence: Ordered, indexable input. It is never mutated.
        combine: Binary callback taking ``(accumulator, element)`` and
            returning the next accumulator.
        seed: Initial accumulator. Any value counts as a seed, falsy ones
            included; leave it as ``MISSING`` to seed from the sequence.

    Returns:
        The accumulator after the last element has been folded in.

    Raises:
        EmptyInputError: If ``sequence`` is empty and no seed was given.
        Whatever ``combine`` raises, unchanged. Folding stops there.
    """
    if seed is MISSING:
        if len(sequence) == 0:
            logger.debug("reduce called on an empty sequence without a seed")
            raise EmptyInputError()
        accumulator = sequence[0]
        start = 1
    else:
        accumulator = seed
        start = 0

    logger.debug(
        "reduce over %d element(s), seeded=%s", len(sequence), seed is not MISSING
    )

    for i in range(start, len(sequence)):
        accumulator = combine(accumulator, sequence[i])
    return accumulator
