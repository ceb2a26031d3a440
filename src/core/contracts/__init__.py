"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных моделей.
"""

from .validators import (
    AggregateSummaryValidator,
    ContractValidator,
    SchemaLoader,
    validate_aggregate_summary,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AggregateSummaryValidator",
    # Functions
    "validate_aggregate_summary",
]
