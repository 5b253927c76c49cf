"""Functional primitives for mapfold.

Both helpers take a callback in place of a hand-written loop body. They are
stateless, leave their input untouched and walk it strictly left to right,
so they compose into larger pipelines without surprises.
"""

from mapfold.functional.sequence import map, reduce

__all__ = ["map", "reduce"]
