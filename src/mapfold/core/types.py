"""Reusable type definitions for the mapfold functional primitives.

Type Aliases:
    Transform: A unary callback mapping one element to one output value.
    Combine: A binary callback merging an accumulator with the next element.

The ``MISSING`` sentinel marks an omitted seed. It is distinct from every
value a caller could pass, so falsy seeds such as ``0``, ``None`` or ``""``
are still honoured.
"""

import typing as tp

__all__ = [
    "MISSING",
    "T",
    "U",
    "A",
    "Transform",
    "Combine",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
A = tp.TypeVar("A")

Transform = tp.Callable[[T], U]
Combine = tp.Callable[[A, T], A]


class _Missing:
    """Singleton type of the ``MISSING`` sentinel."""

    _instance: tp.Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Pickle, copy and deepcopy resolve back to the module attribute
        return "MISSING"


MISSING: tp.Any = _Missing()
