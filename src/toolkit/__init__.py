"""Toolkit — фасад над утилитами ядра с явной конфигурацией."""

from .sequence_utils import (
    SequenceUtils,
    SequenceUtilsConfig,
)

__all__ = [
    "SequenceUtils",
    "SequenceUtilsConfig",
]
