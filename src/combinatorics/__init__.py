"""Combinatorics: разбиения последовательностей и каррирование форм вызова.

- split: все разбиения последовательности на Left / Right
- build_signature / intersect_all: двухстадийные и перегруженные формы
- partial_curry / full_curry: каррирование
- bind_partial_curry / bind_full_curry: runtime реализация форм
"""

from .curry import (
    bind_full_curry,
    bind_partial_curry,
    build_signature,
    full_curry,
    intersect_all,
    partial_curry,
    shape_of,
)
from .split import split

__all__ = [
    "split",
    "build_signature",
    "intersect_all",
    "partial_curry",
    "full_curry",
    "shape_of",
    "bind_partial_curry",
    "bind_full_curry",
]
