"""
Domain models and value objects.

Contains the BigInteger value type, its Sign tag, string parsing and the
immutable state snapshot.
"""

from src.bignum.domain.big_integer import NAN_LITERAL, BigInteger
from src.bignum.domain.parsing import (
    MINUS_SIGN,
    InvalidDigitString,
    is_number,
    is_positive,
    is_zero,
    parse_digits,
)
from src.bignum.domain.sign import Sign
from src.bignum.domain.state import BigIntegerState

__all__ = [
    # BigInteger
    "BigInteger",
    "NAN_LITERAL",
    # Sign
    "Sign",
    # Parsing
    "MINUS_SIGN",
    "InvalidDigitString",
    "is_number",
    "is_positive",
    "is_zero",
    "parse_digits",
    # State snapshot
    "BigIntegerState",
]
