"""
Arbitrary-precision signed integer with an explicit NaN sentinel.

Decimal digit storage, string parsing/formatting, addition, subtraction and
comparison. No multiplication or division.
"""

from src.bignum.domain import (
    BigInteger,
    BigIntegerState,
    InvalidDigitString,
    Sign,
)

__all__ = [
    "BigInteger",
    "BigIntegerState",
    "InvalidDigitString",
    "Sign",
]
