"""
BigInteger — Знаковое целое произвольной точности

Десятичные цифры хранятся least-significant first, знак — закрытый тег Sign
(NAN / NEGATIVE / ZERO / POSITIVE). Магнитудная арифметика делегируется
src.bignum.math.digits, здесь только логика комбинирования знаков.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == NAN <=> digits пустой
2. sign == ZERO <=> digits == [0]
3. Иначе digits непустой и без старшего нуля
4. NaN в парных операциях (sum / difference) всегда даёт NaN
5. Мутация только через add / subtract / change_sign / move / assign;
   add и subtract заменяют состояние целиком, без частичной записи
6. Каждый экземпляр владеет своим списком цифр эксклюзивно

ИЗВЕСТНЫЕ ОСОБЕННОСТИ (сохраняются намеренно):
- == / != сравнивают только цифры: знак игнорируется, NaN == NaN
- sum_many отбрасывает NaN-операнды вместо распространения NaN
"""

import logging
from typing import Final, Iterable, Union

from src.bignum.math.digits import (
    Digits,
    abs_great,
    abs_less,
    magnitude_add,
    magnitude_add_many,
    magnitude_subtract,
)

from .parsing import (
    MINUS_SIGN,
    InvalidDigitString,
    is_number,
    is_positive,
    is_zero,
    parse_digits,
)
from .sign import Sign
from .state import BigIntegerState

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

NAN_LITERAL: Final[str] = "NaN"


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigInteger:
    """
    Знаковое целое произвольной точности с явным NaN.

    Создание:
        BigInteger()            -> 0
        BigInteger("-197")      -> -197 (недопустимая строка -> NaN)
        BigInteger.parse("12")  -> 12 (недопустимая строка -> InvalidDigitString)
        BigInteger.from_digits([7, 9, 1], Sign.NEGATIVE) -> -197

    Чистые операции (новое значение): sum, sum_many, difference, +, -.
    Мутирующие (возвращают self для цепочек): add, subtract, change_sign, +=, -=.
    """

    __slots__ = ("_digits", "_sign")

    _digits: Digits
    _sign: Sign

    def __init__(self, number: Union[str, "BigInteger"] = "0"):
        """
        Permissive-конструктор.

        Args:
            number: Десятичная строка (-?[0-9]+) или BigInteger для копирования.
                Любая другая строка даёт NaN без исключения.
        """
        if isinstance(number, BigInteger):
            number._copy_to(self)
            return

        if not is_number(number):
            logger.debug(f"Malformed decimal string {number!r} coerced to NaN")
            self._set_nan()
            return

        self._set_parsed(number)

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """
        Fallible-парсер.

        Raises:
            InvalidDigitString: Если text не соответствует -?[0-9]+
        """
        if not is_number(text):
            raise InvalidDigitString(text)

        result = cls.__new__(cls)
        result._set_parsed(text)
        return result

    @classmethod
    def from_digits(cls, digits: Iterable[int], sign: Sign) -> "BigInteger":
        """
        Конструирование из готового модуля и знака.

        Нормализация не выполняется: вызывающий код гарантирует отсутствие
        старших нулей.

        Args:
            digits: Цифры 0-9, least-significant first
            sign: Знак. NAN отбрасывает цифры; пустые digits дают ноль
                независимо от знака.

        Raises:
            TypeError: Если sign не Sign
            ValueError: Если среди digits есть значение вне 0-9
        """
        if not isinstance(sign, Sign):
            raise TypeError(f"sign must be Sign, got {type(sign).__name__}")

        digits = list(digits)
        for digit in digits:
            if not 0 <= digit <= 9:
                raise ValueError(f"digit must be in [0, 9], got {digit}")

        return cls._adopt(digits, sign)

    @classmethod
    def from_state(cls, state: BigIntegerState) -> "BigInteger":
        """Восстановление из провалидированного снапшота."""
        return cls._adopt(list(state.digits), state.sign)

    @classmethod
    def nan(cls) -> "BigInteger":
        result = cls.__new__(cls)
        result._set_nan()
        return result

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls()

    @classmethod
    def _adopt(cls, digits: Digits, sign: Sign) -> "BigInteger":
        """Забирает digits во владение без копирования и проверок."""
        result = cls.__new__(cls)

        if sign is Sign.NAN:
            result._set_nan()
        elif not digits:
            result._set_default()
        else:
            result._digits = digits
            result._sign = sign

        return result

    # -------------------------------------------------------------------------
    # State management
    # -------------------------------------------------------------------------

    def _set_default(self) -> None:
        self._digits = [0]
        self._sign = Sign.ZERO

    def _set_nan(self) -> None:
        self._digits = []
        self._sign = Sign.NAN

    def _set_parsed(self, text: str) -> None:
        if is_zero(text):
            # "0", "-0", "000": знак принудительно ZERO
            self._set_default()
            return

        self._digits = parse_digits(text)
        self._sign = Sign.POSITIVE if is_positive(text) else Sign.NEGATIVE

    def _copy_to(self, number: "BigInteger") -> None:
        number._digits = list(self._digits)
        number._sign = self._sign

    def _replace_with(self, result: "BigInteger") -> "BigInteger":
        # result — свежий экземпляр, его список цифр никто больше не держит
        self._digits = result._digits
        self._sign = result._sign
        return self

    def copy(self) -> "BigInteger":
        """Глубокая копия (собственный список цифр)."""
        result = self.__class__.__new__(self.__class__)
        self._copy_to(result)
        return result

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    def move(self) -> "BigInteger":
        """
        Передача владения цифрами новому экземпляру.

        Returns:
            Новый BigInteger с текущим значением; self сбрасывается в ноль
        """
        result = self.__class__.__new__(self.__class__)
        result._digits = self._digits
        result._sign = self._sign
        self._set_default()
        return result

    def assign(self, number: "BigInteger") -> "BigInteger":
        """Замена значения копией number (self-assignment — no-op)."""
        if number is not self:
            number._copy_to(self)
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры модуля, least-significant first (пусто для NaN)."""
        return tuple(self._digits)

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def is_nan(self) -> bool:
        return self._sign is Sign.NAN

    @property
    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    def to_state(self) -> BigIntegerState:
        return BigIntegerState(digits=tuple(self._digits), sign=self._sign)

    # -------------------------------------------------------------------------
    # Stringification
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        "NaN" для NaN; иначе '-' для отрицательных и цифры от старшей к младшей.
        """
        if self._sign is Sign.NAN:
            return NAN_LITERAL

        prefix = MINUS_SIGN if self._sign is Sign.NEGATIVE else ""
        return prefix + "".join(chr(ord("0") + digit) for digit in reversed(self._digits))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger({self.to_string()!r})"

    # -------------------------------------------------------------------------
    # Mutating arithmetic
    # -------------------------------------------------------------------------

    def change_sign(self) -> "BigInteger":
        """POSITIVE <-> NEGATIVE in place; ZERO и NaN не меняются."""
        self._sign = self._sign.opposite()
        return self

    def add(self, number: "BigInteger") -> "BigInteger":
        """self = self + number. Возвращает self."""
        return self._replace_with(BigInteger.sum(self, number))

    def subtract(self, number: "BigInteger") -> "BigInteger":
        """self = self - number. Возвращает self."""
        return self._replace_with(BigInteger.difference(self, number))

    # -------------------------------------------------------------------------
    # Pure arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def sum(first: "BigInteger", second: "BigInteger") -> "BigInteger":
        """
        first + second.

        Правила:
        1. Любой NaN -> NaN
        2. Один из операндов ноль -> копия другого
        3. Одинаковые знаки -> общий знак, сумма модулей
        4. Разные знаки -> знак большего по модулю, разность модулей
           (равные модули дают ноль)
        """
        if first.is_nan or second.is_nan:
            return BigInteger.nan()

        if first.is_zero:
            return second.copy()

        if second.is_zero:
            return first.copy()

        if first._sign is second._sign:
            return BigInteger._adopt(magnitude_add(first._digits, second._digits), first._sign)

        if abs_less(first._digits, second._digits):
            return BigInteger._adopt(
                magnitude_subtract(second._digits, first._digits), second._sign
            )

        return BigInteger._adopt(magnitude_subtract(first._digits, second._digits), first._sign)

    @staticmethod
    def difference(first: "BigInteger", second: "BigInteger") -> "BigInteger":
        """
        first - second.

        Правила:
        1. Любой NaN -> NaN
        2. first ноль -> second с противоположным знаком
        3. second ноль -> копия first
        4. Одинаковые знаки:
           |first| < |second| -> знак, противоположный second, модуль |second| - |first|
           иначе               -> знак second, модуль |first| - |second|
        5. Разные знаки -> знак first, сумма модулей
        """
        if first.is_nan or second.is_nan:
            return BigInteger.nan()

        if first.is_zero:
            return second.copy().change_sign()

        if second.is_zero:
            return first.copy()

        if first._sign is second._sign:
            if abs_less(first._digits, second._digits):
                return BigInteger._adopt(
                    magnitude_subtract(second._digits, first._digits), second._sign.opposite()
                )

            return BigInteger._adopt(
                magnitude_subtract(first._digits, second._digits), second._sign
            )

        return BigInteger._adopt(magnitude_add(first._digits, second._digits), first._sign)

    @staticmethod
    def sum_many(numbers: Iterable["BigInteger"]) -> "BigInteger":
        """
        N-арная сумма.

        Положительные и отрицательные модули суммируются раздельно
        (magnitude_add_many), затем итоги сводятся одним вычитанием.
        Нулевые операнды не влияют на результат. NaN-операнды отбрасываются,
        а не отравляют сумму, в отличие от парных sum / difference.
        Пустой набор даёт ноль.
        """
        positives: list[Digits] = []
        negatives: list[Digits] = []

        for number in numbers:
            if number._sign is Sign.POSITIVE:
                positives.append(number._digits)
            elif number._sign is Sign.NEGATIVE:
                negatives.append(number._digits)
            elif number._sign is Sign.NAN:
                logger.debug("NaN operand dropped from sum_many")

        return BigInteger._subtract_opposite_sign(
            magnitude_add_many(positives), magnitude_add_many(negatives)
        )

    @staticmethod
    def _subtract_opposite_sign(positive: Digits, negative: Digits) -> "BigInteger":
        """positive - negative для двух модулей противоположного знака."""
        if abs_less(positive, negative):
            return BigInteger._adopt(magnitude_subtract(negative, positive), Sign.NEGATIVE)

        return BigInteger._adopt(magnitude_subtract(positive, negative), Sign.POSITIVE)

    # -------------------------------------------------------------------------
    # Python operators
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigInteger":
        if isinstance(other, BigInteger):
            return BigInteger.sum(self, other)

        return NotImplemented

    def __sub__(self, other: object) -> "BigInteger":
        if isinstance(other, BigInteger):
            return BigInteger.difference(self, other)

        return NotImplemented

    def __iadd__(self, other: object) -> "BigInteger":
        if isinstance(other, BigInteger):
            return self.add(other)

        return NotImplemented

    def __isub__(self, other: object) -> "BigInteger":
        if isinstance(other, BigInteger):
            return self.subtract(other)

        return NotImplemented

    def __neg__(self) -> "BigInteger":
        return self.copy().change_sign()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented

        if self.is_nan or other.is_nan:
            return False

        if self._sign is not other._sign:
            return self._sign.value < other._sign.value

        # Более отрицательный модуль — меньшее значение
        if self._sign is Sign.NEGATIVE:
            return abs_less(other._digits, self._digits)

        return abs_less(self._digits, other._digits)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented

        if self.is_nan or other.is_nan:
            return False

        if self._sign is not other._sign:
            return self._sign.value > other._sign.value

        if self._sign is Sign.NEGATIVE:
            return abs_great(other._digits, self._digits)

        return abs_great(self._digits, other._digits)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented

        return not self.__gt__(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented

        return not self.__lt__(other)

    def __eq__(self, other: object) -> bool:
        """
        Структурное равенство: одинаковая длина и одинаковые цифры.

        Знак не учитывается, NaN не выделяется (два NaN равны).
        """
        if not isinstance(other, BigInteger):
            return NotImplemented

        return self._digits == other._digits

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented

        return not self.__eq__(other)

    # Мутабельный тип со структурным ==
    __hash__ = None  # type: ignore[assignment]
