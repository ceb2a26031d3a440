"""
Тесты для Aggregation — sum_all, square_all, average, aggregate

Проверяемые инварианты:
1. Sum — left fold без дополнительного seed (int вход → int сумма)
2. SquareAll сохраняет длину и порядок, не идемпотентна
3. Average — float деление
4. Пустой вход → EmptyInputError (fail fast)
5. Невалидный вход → TypeError
6. Вход не модифицируется, результат детерминирован
"""

import math

import pytest

from src.core.domain import AggregateSummary
from src.core.math import EmptyInputError, aggregate, average, square_all, sum_all

ODDS = [1, 3, 5, 7, 9]


# =============================================================================
# ТЕСТЫ: Sum
# =============================================================================


class TestSumAll:
    """Тесты sum_all"""

    def test_known_sum(self) -> None:
        assert sum_all(ODDS) == 25

    def test_int_input_keeps_int(self) -> None:
        assert isinstance(sum_all(ODDS), int)

    def test_single_element(self) -> None:
        assert sum_all([42]) == 42
        assert sum_all((-1.5,)) == -1.5

    def test_floats(self) -> None:
        assert sum_all([0.1, 0.2]) == pytest.approx(0.3)

    def test_left_fold_order(self) -> None:
        """((1e16 + 1.0) + -1e16) теряет 1.0 при left fold"""
        assert sum_all([1e16, 1.0, -1e16]) == 0.0

    def test_negative_values(self) -> None:
        assert sum_all([-1, -2, 3]) == 0

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyInputError, match="non-empty"):
            sum_all([])

    def test_empty_error_is_value_error(self) -> None:
        assert issubclass(EmptyInputError, ValueError)

    def test_non_sequence_raises(self) -> None:
        with pytest.raises(TypeError, match="sequence of numbers"):
            sum_all(5)  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="sequence of numbers"):
            sum_all("135")  # type: ignore[arg-type]

    def test_non_numeric_element_raises(self) -> None:
        with pytest.raises(TypeError, match=r"values\[1\]"):
            sum_all([1, "2", 3])  # type: ignore[list-item]

    def test_bool_element_raises(self) -> None:
        with pytest.raises(TypeError, match="real number"):
            sum_all([1, True])  # type: ignore[list-item]


# =============================================================================
# ТЕСТЫ: SquareAll
# =============================================================================


class TestSquareAll:
    """Тесты square_all"""

    def test_known_squares(self) -> None:
        assert square_all(ODDS) == [1, 9, 25, 49, 81]

    def test_preserves_length_and_order(self) -> None:
        values = [3, -1, 2]
        result = square_all(values)

        assert len(result) == len(values)
        assert result == [9, 1, 4]

    def test_negative_and_fractional(self) -> None:
        assert square_all([-3, 0.5]) == [9, 0.25]

    def test_empty_gives_empty(self) -> None:
        assert square_all([]) == []

    def test_not_idempotent(self) -> None:
        once = square_all([2, 3])
        twice = square_all(once)

        assert once == [4, 9]
        assert twice == [16, 81]
        assert twice != once

    def test_input_not_mutated(self) -> None:
        values = [1, 2, 3]
        square_all(values)

        assert values == [1, 2, 3]

    def test_non_numeric_element_raises(self) -> None:
        with pytest.raises(TypeError):
            square_all([1, None])  # type: ignore[list-item]


# =============================================================================
# ТЕСТЫ: Average
# =============================================================================


class TestAverage:
    """Тесты average"""

    def test_known_average(self) -> None:
        assert average(ODDS) == 5

    def test_float_division(self) -> None:
        result = average([1, 2])

        assert result == 1.5
        assert isinstance(result, float)

    def test_int_average_is_float(self) -> None:
        assert isinstance(average(ODDS), float)

    def test_single_element(self) -> None:
        assert average([7]) == 7.0

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            average([])

    def test_nan_propagates(self) -> None:
        assert math.isnan(average([1.0, float("nan")]))


# =============================================================================
# ТЕСТЫ: Aggregate
# =============================================================================


class TestAggregate:
    """Тесты aggregate: все три значения за один вызов"""

    def test_known_summary(self) -> None:
        summary = aggregate(ODDS)

        assert isinstance(summary, AggregateSummary)
        assert summary.count == 5
        assert summary.total == 25
        assert summary.squares == (1, 9, 25, 49, 81)
        assert summary.average == 5

    def test_matches_individual_operations(self) -> None:
        values = [2.5, -1.0, 4.0, 0.5]
        summary = aggregate(values)

        assert summary.total == pytest.approx(sum_all(values))
        assert list(summary.squares) == pytest.approx(square_all(values))
        assert summary.average == pytest.approx(average(values))

    def test_square_sum(self) -> None:
        assert aggregate(ODDS).square_sum() == 165.0

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            aggregate([])

    def test_non_finite_values_propagate(self) -> None:
        summary = aggregate([1.0, float("inf")])

        assert math.isinf(summary.total)
        assert math.isinf(summary.average)

    def test_deterministic(self) -> None:
        assert aggregate(ODDS) == aggregate(list(ODDS))

    def test_input_not_mutated(self) -> None:
        values = [4, 2, 9]
        aggregate(values)

        assert values == [4, 2, 9]


# =============================================================================
# ТЕСТЫ: большие int вне диапазона float
# =============================================================================


class TestLargeIntegers:
    """Float-результаты большого int переполняются в ±inf без OverflowError"""

    def test_sum_and_squares_stay_exact(self) -> None:
        assert sum_all([10**400, 1]) == 10**400 + 1
        assert square_all([10**200]) == [10**400]

    def test_average_overflows_to_inf(self) -> None:
        assert average([10**400]) == math.inf
        assert average([-(10**400)]) == -math.inf
        assert average([10**400, 10**400]) == math.inf

    def test_average_in_float_range(self) -> None:
        assert average([10**200, 3 * 10**200]) == pytest.approx(2e200)

    def test_aggregate_square_overflows_to_inf(self) -> None:
        summary = aggregate([10**200])

        assert summary.total == pytest.approx(1e200)
        assert summary.squares == (math.inf,)
        assert summary.average == pytest.approx(1e200)

    def test_aggregate_total_overflows_to_inf(self) -> None:
        summary = aggregate([10**400, 2])

        assert summary.total == math.inf
        assert summary.average == math.inf
        assert summary.squares == (math.inf, 4.0)

    def test_aggregate_negative_overflow(self) -> None:
        summary = aggregate([-(10**400)])

        assert summary.total == -math.inf
        assert summary.average == -math.inf
        assert summary.squares == (math.inf,)
