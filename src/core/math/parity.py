"""
Parity — предикаты чётности

Чётность определена только для целых значений:
- numbers.Integral принимается как есть
- Вещественные значения без дробной части (4.0) принимаются
- Дробные значения и NaN/Inf → ParityDomainViolation
- bool и не-числа → TypeError

Остаток считается по модулю 2; для проверки на ноль знак остатка не важен,
поэтому -2 и 0 чётные.
"""

import numbers

from src.core.math.numerical_safeguards import is_integral, validate_real


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParityDomainViolation(ValueError):
    """Чётность запрошена для нецелого или неконечного значения."""

    pass


# =============================================================================
# PARITY
# =============================================================================


def _require_integral(n: numbers.Real) -> numbers.Real:
    validate_real(n, "n")

    if not is_integral(n):
        raise ParityDomainViolation(f"Parity is defined for integers only, got {n!r}")

    return n


def is_even(n: numbers.Real) -> bool:
    """
    Проверка чётности.

    Args:
        n: Целое число (или float без дробной части)

    Returns:
        True если n делится на 2 без остатка

    Raises:
        ParityDomainViolation: если n дробное, NaN или Inf
        TypeError: если n не число или bool

    Examples:
        >>> is_even(4)
        True
        >>> is_even(7)
        False
        >>> is_even(0)
        True
        >>> is_even(-2)
        True
    """
    return _require_integral(n) % 2 == 0


def is_odd(n: numbers.Real) -> bool:
    """Проверка нечётности (дополнение is_even, та же валидация)."""
    return not is_even(n)
