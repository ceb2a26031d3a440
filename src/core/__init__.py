"""
Core sequence utilities: prefix slicing, vowel counting, parity and aggregation.

This module contains pure functions and immutable models with no shared
mutable state and no I/O.
"""
