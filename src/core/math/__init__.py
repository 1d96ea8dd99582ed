"""
Core math modules

Поразрядная арифметика натуральных чисел над последовательностями цифр.
"""

# Digits (одиночные цифры)
from src.core.math.digits import (
    DIGITS,
    DigitStep,
    DigitStrategy,
    add_digits,
    decrement,
    increment,
    is_digit,
    subtract_digits,
    validate_digit,
)

# Digit Sequences (примитивы последовательностей)
from src.core.math.digit_sequences import (
    is_empty,
    is_normalized,
    last_digit,
    natural_from_int,
    natural_to_int,
    normalize_digit_sequence,
    prefix,
    strip_leading_zeros,
    validate_digit_sequence,
)

# Naturals (операции над числами)
from src.core.math.naturals import (
    DEFAULT_CONFIG,
    MODULO_WARN_ITERATIONS_DEFAULT,
    ArithmeticConfig,
    ModuloStrategy,
    add,
    compare,
    modulo,
    multiply,
    subtract,
)

__all__ = [
    # Digits: Constants
    "DIGITS",
    # Digits: Types
    "DigitStep",
    "DigitStrategy",
    # Digits: Functions
    "add_digits",
    "decrement",
    "increment",
    "is_digit",
    "subtract_digits",
    "validate_digit",
    # Digit Sequences: Functions
    "is_empty",
    "is_normalized",
    "last_digit",
    "natural_from_int",
    "natural_to_int",
    "normalize_digit_sequence",
    "prefix",
    "strip_leading_zeros",
    "validate_digit_sequence",
    # Naturals: Constants
    "DEFAULT_CONFIG",
    "MODULO_WARN_ITERATIONS_DEFAULT",
    # Naturals: Types
    "ArithmeticConfig",
    "ModuloStrategy",
    # Naturals: Functions
    "add",
    "compare",
    "modulo",
    "multiply",
    "subtract",
]
