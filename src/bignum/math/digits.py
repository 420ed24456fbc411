"""
Digits — Magnitude Arithmetic над десятичными цифрами

Sign-agnostic примитивы для BigInteger. Работают только с последовательностями
цифр (least-significant digit first), знак обрабатывается уровнем выше.

- Поразрядное сложение с переносом (carry), парное и N-арное
- Поразрядное вычитание с заёмом (debt/borrow)
- Сравнение по модулю (abs_less / abs_great)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные последовательности нормализованы: нет старших нулевых цифр
2. magnitude_subtract требует |long| >= |short| (упорядочивает вызывающий код)
3. Результат magnitude_subtract нормализован; пустой результат означает ноль
4. Входные последовательности никогда не мутируются
"""

from typing import Final, Iterable, Sequence

# =============================================================================
# CONSTANTS
# =============================================================================

# Основание системы счисления (одна цифра на элемент, без word-packing)
NUMBER_BASE: Final[int] = 10

Digits = list[int]


# =============================================================================
# DIGIT-LEVEL HELPERS
# =============================================================================


def sum_digit(raw: int) -> tuple[int, int]:
    """
    Нормализация суммы одного разряда.

    Args:
        raw: Сумма цифр разряда (уже с учётом входящего carry)

    Returns:
        (digit, carry): цифра разряда и перенос в следующий разряд

    Examples:
        >>> sum_digit(7)
        (7, 0)
        >>> sum_digit(17)
        (7, 1)
        >>> sum_digit(27)
        (7, 2)
    """
    if raw >= NUMBER_BASE:
        return raw % NUMBER_BASE, raw // NUMBER_BASE

    return raw, 0


def subtract_digit(reduced: int, subtracted: int, debt: int) -> tuple[int, int]:
    """
    Вычитание одного разряда с учётом заёма.

    Args:
        reduced: Цифра уменьшаемого
        subtracted: Цифра вычитаемого (0 за пределами короткого числа)
        debt: Заём из предыдущего (младшего) разряда

    Returns:
        (digit, debt): цифра разряда и заём для следующего разряда

    Examples:
        >>> subtract_digit(5, 3, 0)
        (2, 0)
        >>> subtract_digit(3, 5, 0)
        (8, 1)
        >>> subtract_digit(0, 0, 1)
        (9, 1)
    """
    reduced -= debt + subtracted

    if reduced < 0:
        return NUMBER_BASE + reduced, 1

    return reduced, 0


def trim_leading_zeros(digits: Digits) -> Digits:
    """Удаляет старшие нулевые цифры in place (пустой список = ноль)."""
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


# =============================================================================
# MAGNITUDE ADDITION
# =============================================================================


def magnitude_add(first: Sequence[int], second: Sequence[int]) -> Digits:
    """
    Сложение двух модулей столбиком.

    Сначала обходится общий префикс (обе последовательности), затем хвост
    длинной последовательности с продолжением переноса. Результат длиннее
    самого длинного операнда максимум на одну цифру.

    Args:
        first: Цифры первого операнда (least-significant first)
        second: Цифры второго операнда (least-significant first)

    Returns:
        Цифры суммы (least-significant first)

    Examples:
        >>> magnitude_add([9, 9, 9], [1])
        [0, 0, 0, 1]
        >>> magnitude_add([5], [4, 2])
        [9, 2]
    """
    short_num, long_num = (first, second) if len(first) < len(second) else (second, first)

    result: Digits = []
    carry = 0

    for i in range(len(short_num)):
        digit, carry = sum_digit(short_num[i] + long_num[i] + carry)
        result.append(digit)

    for i in range(len(short_num), len(long_num)):
        digit, carry = sum_digit(long_num[i] + carry)
        result.append(digit)

    while carry > 0:
        digit, carry = sum_digit(carry)
        result.append(digit)

    return result


def magnitude_add_many(numbers: Iterable[Sequence[int]]) -> Digits:
    """
    N-арное сложение модулей.

    На каждой позиции суммируются цифры всех достаточно длинных
    последовательностей плюс перенос. Перенос может быть больше 9 при
    большом количестве слагаемых, поэтому хвост раскладывается по цифрам.

    Args:
        numbers: Цифры слагаемых (least-significant first)

    Returns:
        Цифры суммы; пустой список, если слагаемых нет
    """
    numbers = list(numbers)
    max_length = max((len(number) for number in numbers), default=0)

    result: Digits = []
    carry = 0

    for i in range(max_length):
        raw = sum(number[i] for number in numbers if i < len(number))
        digit, carry = sum_digit(raw + carry)
        result.append(digit)

    while carry > 0:
        digit, carry = sum_digit(carry)
        result.append(digit)

    return result


# =============================================================================
# MAGNITUDE SUBTRACTION
# =============================================================================


def magnitude_subtract(long_num: Sequence[int], short_num: Sequence[int]) -> Digits:
    """
    Вычитание модулей столбиком: |long_num| - |short_num|.

    Предусловие: |long_num| >= |short_num|. Публичный API всегда
    упорядочивает операнды через abs_less перед вызовом.

    После исчерпания short_num из оставшихся цифр вычитается только заём;
    как только заём обнулился, хвост копируется без изменений.

    Args:
        long_num: Уменьшаемое (больший модуль)
        short_num: Вычитаемое (меньший модуль)

    Returns:
        Нормализованные цифры разности; пустой список, если разность равна нулю

    Examples:
        >>> magnitude_subtract([0, 0, 0, 1], [1])
        [9, 9, 9]
        >>> magnitude_subtract([7, 9, 1], [7, 9, 1])
        []
    """
    result: Digits = []
    debt = 0

    for i in range(len(short_num)):
        digit, debt = subtract_digit(long_num[i], short_num[i], debt)
        result.append(digit)

    for i in range(len(short_num), len(long_num)):
        if debt == 0:
            result.extend(long_num[i:])
            break

        digit, debt = subtract_digit(long_num[i], 0, debt)
        result.append(digit)

    return trim_leading_zeros(result)


# =============================================================================
# MAGNITUDE COMPARISON
# =============================================================================


def abs_less(first: Sequence[int], second: Sequence[int]) -> bool:
    """
    |first| < |second| (знак не учитывается).

    Для нормализованных последовательностей длина монотонно отражает модуль,
    поэтому при разной длине решает длина. При равной длине цифры сравниваются
    от старшей к младшей до первого различия.
    """
    if len(first) != len(second):
        return len(first) < len(second)

    for i in range(len(first) - 1, -1, -1):
        if first[i] != second[i]:
            return first[i] < second[i]

    return False


def abs_great(first: Sequence[int], second: Sequence[int]) -> bool:
    """|first| > |second| (знак не учитывается)."""
    if len(first) != len(second):
        return len(first) > len(second)

    for i in range(len(first) - 1, -1, -1):
        if first[i] != second[i]:
            return first[i] > second[i]

    return False
