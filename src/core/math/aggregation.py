"""
Aggregation — Sum, SquareAll и Average для числовых последовательностей

Модуль вычисляет сводные значения по непустой последовательности чисел:
- sum_all: left fold сложением, стартовое значение равно первому элементу
- square_all: поэлементный квадрат с сохранением порядка
- average: sum_all / len, всегда float-деление
- aggregate: все три значения в одной AggregateSummary

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой вход для sum_all / average / aggregate → EmptyInputError
2. Входная последовательность никогда не модифицируется
3. Для входа из int сумма остаётся int (нет float-seed 0.0)
4. NaN/Inf во входе не санитизируются и пропагируют в результат
5. Float-результаты большого int переполняются в ±inf, а не в OverflowError

ФОРМУЛЫ:
    Sum = ((x_0 + x_1) + x_2) + ... + x_{n-1}
    SquareAll = [x_0², x_1², ..., x_{n-1}²]
    Average = Sum / n

square_all НЕ идемпотентна: square_all(square_all(xs)) != square_all(xs)
в общем случае.
"""

import logging
import numbers
import operator
from collections.abc import Sequence
from functools import reduce

from src.core.domain.aggregate_summary import AggregateSummary
from src.core.math.numerical_safeguards import float_divide, to_float, validate_real_sequence

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyInputError(ValueError):
    """
    Агрегация вызвана для пустой последовательности.

    Сумма без стартового значения и среднее по нулю элементов не определены,
    поэтому пустой вход отклоняется сразу, а не заменяется на 0.
    """

    pass


def _require_non_empty(values: Sequence[numbers.Real], operation: str) -> list:
    items = validate_real_sequence(values, "values")

    if not items:
        logger.debug("%s rejected empty input", operation)
        raise EmptyInputError(f"{operation} requires a non-empty sequence")

    return items


# =============================================================================
# SUM / SQUARE / AVERAGE
# =============================================================================


def sum_all(values: Sequence[numbers.Real]) -> numbers.Real:
    """
    Сумма элементов через left fold.

    Args:
        values: Непустая последовательность чисел

    Returns:
        Сумма; для входа из int результат тоже int

    Raises:
        EmptyInputError: если values пустая
        TypeError: если values не последовательность или содержит не-число

    Examples:
        >>> sum_all([1, 3, 5, 7, 9])
        25
        >>> sum_all([0.5, 0.25])
        0.75
    """
    items = _require_non_empty(values, "sum_all")
    return reduce(operator.add, items)


def square_all(values: Sequence[numbers.Real]) -> list:
    """
    Поэлементный квадрат.

    Пустой вход допустим и даёт пустой список: предусловие непустоты
    нужно только операциям-свёрткам.

    Examples:
        >>> square_all([1, 3, 5, 7, 9])
        [1, 9, 25, 49, 81]
        >>> square_all([-2])
        [4]
    """
    items = validate_real_sequence(values, "values")
    return [value * value for value in items]


def average(values: Sequence[numbers.Real]) -> float:
    """
    Среднее арифметическое.

    Average = sum_all(values) / len(values), деление всегда float.
    Результат вне диапазона float даёт ±inf.

    Raises:
        EmptyInputError: если values пустая
        TypeError: если values не последовательность или содержит не-число

    Examples:
        >>> average([1, 3, 5, 7, 9])
        5.0
    """
    items = _require_non_empty(values, "average")
    return float_divide(reduce(operator.add, items), len(items))


# =============================================================================
# AGGREGATE
# =============================================================================


def aggregate(values: Sequence[numbers.Real]) -> AggregateSummary:
    """
    Вычисление Sum, SquareAll и Average за один вызов.

    Args:
        values: Непустая последовательность чисел

    Returns:
        AggregateSummary (count, total, squares, average)

    Raises:
        EmptyInputError: если values пустая
        TypeError: если values не последовательность или содержит не-число

    Examples:
        >>> summary = aggregate([1, 3, 5, 7, 9])
        >>> summary.total, summary.average
        (25.0, 5.0)
        >>> summary.squares
        (1.0, 9.0, 25.0, 49.0, 81.0)
    """
    items = _require_non_empty(values, "aggregate")

    total = reduce(operator.add, items)

    return AggregateSummary(
        count=len(items),
        total=to_float(total),
        squares=tuple(to_float(value * value) for value in items),
        average=float_divide(total, len(items)),
    )
