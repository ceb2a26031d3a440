"""
Numerical Safeguards — общие числовые предикаты и валидация входов

Модуль содержит примитивы, которые используют parity, aggregation и
доменные модели:
- Проверка, что значение является вещественным числом (bool исключён)
- Проверка конечности и целочисленности
- Приведение к float с переполнением в ±inf
- Проверка формы входа (последовательность, но не строка)
- Валидация числовых последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не считается числом (True + True не является суммой чисел)
2. Входные последовательности никогда не модифицируются
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from collections.abc import Sequence
from typing import Any

# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_real_number(value: Any) -> bool:
    """
    Проверка, является ли значение вещественным числом.

    Принимает int, float, Fraction и любые numbers.Real (включая numpy
    скаляры). bool формально является int, но числом здесь не считается.

    Examples:
        >>> is_real_number(3)
        True
        >>> is_real_number(2.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("3")
        False
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """
    Проверка, является ли значение последовательностью элементов.

    str, bytes и bytearray формально Sequence, но последовательностями
    элементов здесь не считаются.

    Examples:
        >>> is_sequence([1, 2])
        True
        >>> is_sequence((1, 2))
        True
        >>> is_sequence("12")
        False
        >>> is_sequence({1, 2})
        False
    """
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: numbers.Real) -> bool:
    """
    Проверка, что вещественное значение целое.

    numbers.Integral → всегда True.
    Остальные numbers.Real → True только для конечных значений без
    дробной части (4.0 → True, 4.5 → False, NaN/Inf → False).

    Examples:
        >>> is_integral(4)
        True
        >>> is_integral(-2.0)
        True
        >>> is_integral(2.5)
        False
        >>> is_integral(float("inf"))
        False
    """
    if isinstance(value, numbers.Integral):
        return True

    # Fraction: без float(), большие значения не переполняются
    if isinstance(value, numbers.Rational):
        return value.denominator == 1

    if not is_valid_float(float(value)):
        return False

    return value == math.floor(value)


# =============================================================================
# ПРИВЕДЕНИЕ К FLOAT
# =============================================================================


def to_float(value: numbers.Real) -> float:
    """
    Приведение к float с переполнением в ±inf.

    int вне диапазона float даёт ±inf вместо OverflowError.

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(10**400)
        inf
        >>> to_float(-(10**400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def float_divide(numerator: numbers.Real, denominator: int) -> float:
    """
    Деление с float-семантикой для положительного denominator.

    Результат int / int вне диапазона float даёт ±inf вместо OverflowError.

    Examples:
        >>> float_divide(25, 5)
        5.0
        >>> float_divide(10**400, 1)
        inf
    """
    try:
        return to_float(numerator / denominator)
    except OverflowError:
        return math.inf if numerator > 0 else -math.inf


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_real(value: Any, name: str) -> None:
    """
    Валидация, что значение вещественное число.

    Raises:
        TypeError: Если value не numbers.Real или является bool
    """
    if not is_real_number(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


def validate_real_sequence(values: Any, name: str) -> list:
    """
    Валидация числовой последовательности.

    Последовательность должна быть collections.abc.Sequence (str/bytes
    исключены), каждый элемент является вещественным числом.

    Args:
        values: Проверяемая последовательность
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Новый список элементов в исходном порядке (вход не модифицируется)

    Raises:
        TypeError: Если values не последовательность или содержит не-число
    """
    if not is_sequence(values):
        raise TypeError(f"{name} must be a sequence of numbers, got {type(values).__name__}")

    items = list(values)

    for index, item in enumerate(items):
        if not is_real_number(item):
            raise TypeError(
                f"{name}[{index}] must be a real number, got {type(item).__name__}"
            )

    return items
