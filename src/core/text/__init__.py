"""Text utilities."""

from src.core.text.vowels import VOWELS, count_vowels, is_vowel

__all__ = [
    "VOWELS",
    "count_vowels",
    "is_vowel",
]
