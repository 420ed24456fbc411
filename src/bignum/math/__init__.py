"""
Math modules для bignum

Sign-agnostic арифметика над последовательностями десятичных цифр.
"""

from src.bignum.math.digits import (
    NUMBER_BASE,
    Digits,
    # Magnitude comparison
    abs_great,
    abs_less,
    # Magnitude arithmetic
    magnitude_add,
    magnitude_add_many,
    magnitude_subtract,
    # Digit-level helpers
    subtract_digit,
    sum_digit,
    trim_leading_zeros,
)

__all__ = [
    "NUMBER_BASE",
    "Digits",
    # Magnitude comparison
    "abs_great",
    "abs_less",
    # Magnitude arithmetic
    "magnitude_add",
    "magnitude_add_many",
    "magnitude_subtract",
    # Digit-level helpers
    "subtract_digit",
    "sum_digit",
    "trim_leading_zeros",
]
