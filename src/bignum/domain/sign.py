"""
Sign — Знак BigInteger

Закрытое четырёхзначное множество вместо bool + неявного флага NaN:
NaN обязан распространяться через арифметику, а ноль должен отличаться
от "positive со значением 0".

Порядок рангов: NEGATIVE < ZERO < POSITIVE. NaN не упорядочен.
"""

from enum import Enum


class Sign(int, Enum):
    """Знак числа (ранг = value для упорядоченных знаков)"""

    NAN = -2
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @property
    def is_ordered(self) -> bool:
        """True для всех знаков, кроме NaN."""
        return self is not Sign.NAN

    def opposite(self) -> "Sign":
        """
        Противоположный знак.

        POSITIVE <-> NEGATIVE; ZERO и NAN являются неподвижными точками.
        """
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        return self
