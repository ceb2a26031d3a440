"""SequenceUtils — единая точка входа для утилит последовательностей.

Объединяет независимые операции ядра:
- take_first: ограниченный префикс
- count_vowels: подсчёт гласных
- is_even / is_odd: чётность
- sum_all / square_all / average / aggregate: агрегация

Состояние (настройки) передаётся явно через SequenceUtilsConfig и хранится
в self.config; операции не зависят от контекста вызова.
"""

import logging
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.core.contracts import validate_aggregate_summary
from src.core.domain import AggregateSummary
from src.core.math import aggregate, average, is_even, is_odd, square_all, sum_all
from src.core.sequence import DEFAULT_TAKE_COUNT, take_first
from src.core.text import count_vowels

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SequenceUtilsConfig:
    """Конфигурация SequenceUtils.

    default_take_count: длина префикса, если n не передан
    validate_contracts: проверять сериализованную AggregateSummary по JSON Schema
    """

    default_take_count: int = DEFAULT_TAKE_COUNT
    validate_contracts: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.default_take_count, bool) or not isinstance(
            self.default_take_count, int
        ):
            raise ValueError(
                f"default_take_count must be int, got {type(self.default_take_count).__name__}"
            )
        if self.default_take_count < 0:
            raise ValueError(
                f"default_take_count must be non-negative, got {self.default_take_count}"
            )


# =============================================================================
# SEQUENCE UTILS
# =============================================================================


class SequenceUtils:
    """Фасад над чистыми функциями ядра.

    Каждый вызов независим: одинаковый вход даёт одинаковый выход.
    """

    def __init__(self, config: SequenceUtilsConfig | None = None):
        """Инициализация SequenceUtils.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or SequenceUtilsConfig()
        logger.debug("SequenceUtils initialized with %s", self.config)

    def take_first(self, sequence: Any, n: Any = None) -> list:
        """Префикс длины n (config.default_take_count, если n не передан)."""
        if n is None:
            n = self.config.default_take_count
        return take_first(sequence, n)

    def count_vowels(self, text: str) -> int:
        return count_vowels(text)

    def is_even(self, n: numbers.Real) -> bool:
        return is_even(n)

    def is_odd(self, n: numbers.Real) -> bool:
        return is_odd(n)

    def sum_all(self, values: Sequence[numbers.Real]) -> numbers.Real:
        return sum_all(values)

    def square_all(self, values: Sequence[numbers.Real]) -> list:
        return square_all(values)

    def average(self, values: Sequence[numbers.Real]) -> float:
        return average(values)

    def aggregate(self, values: Sequence[numbers.Real]) -> AggregateSummary:
        """Сводка Sum/SquareAll/Average.

        При config.validate_contracts сериализованная сводка проверяется
        по контракту aggregate_summary.

        Raises:
            EmptyInputError: если values пустая
            TypeError: если values не числовая последовательность
            jsonschema.ValidationError: если сводка нарушает контракт
        """
        summary = aggregate(values)

        if self.config.validate_contracts:
            validate_aggregate_summary(summary.model_dump(mode="json"))

        return summary
