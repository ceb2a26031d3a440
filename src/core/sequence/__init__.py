"""Sequence slicing utilities."""

from src.core.math.numerical_safeguards import is_sequence
from src.core.sequence.prefix import DEFAULT_TAKE_COUNT, take_first

__all__ = [
    "DEFAULT_TAKE_COUNT",
    "is_sequence",
    "take_first",
]
