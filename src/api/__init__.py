"""
Public API of the symbolic engines.

Small functional boundary consumed by presentation layers.
"""

from .naturals import (
    add_naturals,
    modulo_naturals,
    multiply_naturals,
    parse_natural,
    subtract_naturals,
)
from .sequences import (
    curry_callable,
    full_curry,
    partial_curry,
    shape_of,
    split_sequence,
)

__all__ = [
    # Naturals
    "parse_natural",
    "add_naturals",
    "subtract_naturals",
    "modulo_naturals",
    "multiply_naturals",
    # Sequences
    "split_sequence",
    "partial_curry",
    "full_curry",
    "shape_of",
    "curry_callable",
]
