"""
Vowels — подсчёт гласных в тексте

Гласные: a, e, i, o, u в любом регистре. Распознаются только ASCII гласные:
без Unicode case folding и без локали ("É", "y" гласными не считаются).
"""

from typing import Final

# Оба регистра перечислены явно, str.lower() не используется
VOWELS: Final[frozenset[str]] = frozenset("aeiouAEIOU")


def is_vowel(char: str) -> bool:
    """
    Проверка, является ли символ гласной.

    Raises:
        TypeError: если char не str
        ValueError: если char не ровно один символ
    """
    if not isinstance(char, str):
        raise TypeError(f"char must be str, got {type(char).__name__}")

    if len(char) != 1:
        raise ValueError(f"char must be a single character, got {char!r}")

    return char in VOWELS


def count_vowels(text: str) -> int:
    """
    Количество гласных в тексте.

    Каждый символ просматривается ровно один раз.

    Args:
        text: Исходный текст

    Returns:
        Число символов text, входящих в VOWELS

    Raises:
        TypeError: если text не str

    Examples:
        >>> count_vowels("Australia")
        5
        >>> count_vowels("")
        0
        >>> count_vowels("rhythm 42!")
        0
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    return sum(1 for char in text if char in VOWELS)
