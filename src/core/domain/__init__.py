"""
Domain models and value objects.

Contains immutable result models produced by the core utilities.
"""

from src.core.domain.aggregate_summary import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    AggregateSummary,
)

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "AggregateSummary",
]
