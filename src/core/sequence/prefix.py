"""
Prefix — ограниченный префикс последовательности

take_first никогда не выбрасывает исключений: невалидный вход деградирует
в пустой список.

Правила:
- Не последовательность (включая str/bytes) или пустая → []
- n <= 0 → []
- n >= len(sequence) → вся последовательность
- n по умолчанию DEFAULT_TAKE_COUNT (1)

Нецелый n приводится как при срезе: bool → int, дробный → усечение к нулю,
NaN и -inf → 0, +inf → длина последовательности, не-число → [].
"""

import logging
import math
import numbers
from typing import Any, Final

from src.core.math.numerical_safeguards import is_real_number, is_sequence

logger = logging.getLogger(__name__)

# Длина префикса по умолчанию
DEFAULT_TAKE_COUNT: Final[int] = 1


def _normalize_count(n: Any, length: int) -> int | None:
    """Приведение n к целой длине префикса, None для не-числа."""
    if isinstance(n, numbers.Integral):
        return int(n)

    if not is_real_number(n):
        return None

    value = float(n)

    if math.isnan(value):
        return 0

    if math.isinf(value):
        return length if value > 0 else 0

    return math.trunc(value)


def take_first(sequence: Any, n: Any = DEFAULT_TAKE_COUNT) -> list:
    """
    Первые min(n, len(sequence)) элементов в исходном порядке.

    Args:
        sequence: Исходная последовательность (не модифицируется)
        n: Длина префикса (default: DEFAULT_TAKE_COUNT)

    Returns:
        Новый список; [] для невалидного или пустого входа и для n <= 0

    Examples:
        >>> take_first([7, 9, 0, -2], 3)
        [7, 9, 0]
        >>> take_first([1, 2, 3], 5)
        [1, 2, 3]
        >>> take_first([5, 4, 3, 2, 1])
        [5]
        >>> take_first([7, 9, 0, -2], -3)
        []
        >>> take_first("hello", 2)
        []
    """
    if not is_sequence(sequence):
        logger.debug("take_first: %s is not a sequence, returning []", type(sequence).__name__)
        return []

    length = len(sequence)
    if length == 0:
        return []

    count = _normalize_count(n, length)

    if count is None:
        logger.debug("take_first: n of type %s is not a number, returning []", type(n).__name__)
        return []

    if count <= 0:
        return []

    return list(sequence[:count])
