"""
AggregateSummary — Сводка агрегации числовой последовательности

Immutable Pydantic модель с результатами sum_all / square_all / average.
Полная совместимость с JSON Schema (src/core/contracts/schema/aggregate_summary.json).
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантности для проверки согласованности average * count ≈ total
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# AGGREGATE SUMMARY MODEL
# =============================================================================


class AggregateSummary(BaseModel):
    """
    Сводка агрегации непустой числовой последовательности.

    Immutable модель (frozen=True). Инварианты:
    - count >= 1 (пустой вход отклоняется до построения модели)
    - len(squares) == count
    - average * count ≈ total (для конечных значений)
    """

    count: int = Field(..., ge=1, description="Количество элементов")
    total: float = Field(..., description="Сумма элементов (left fold)")
    squares: tuple[float, ...] = Field(
        ..., min_length=1, description="Квадраты элементов в исходном порядке"
    )
    average: float = Field(..., description="Среднее арифметическое (total / count)")

    model_config = {"frozen": True}

    @field_validator("squares")
    @classmethod
    def validate_squares_length(cls, v: tuple[float, ...], info) -> tuple[float, ...]:
        """Проверка, что квадратов столько же, сколько элементов"""
        if "count" in info.data:
            count = info.data["count"]
            if len(v) != count:
                raise ValueError(f"squares has {len(v)} items, expected count={count}")
        return v

    @field_validator("average")
    @classmethod
    def validate_average_matches_total(cls, v: float, info) -> float:
        """Проверка, что average согласован с total и count"""
        if "count" in info.data and "total" in info.data:
            expected = info.data["total"] / info.data["count"]
            # NaN/Inf пропагируют из входа, согласованность для них не проверяется
            if math.isfinite(expected) and math.isfinite(v):
                if not math.isclose(
                    v, expected, rel_tol=EPS_FLOAT_COMPARE_REL, abs_tol=EPS_FLOAT_COMPARE_ABS
                ):
                    raise ValueError(
                        f"average {v} does not match total / count = {expected}"
                    )
        return v

    def square_sum(self) -> float:
        """Сумма квадратов (для дисперсии и RMS)."""
        return math.fsum(self.squares)
