"""errors.py — Ошибки пакета uperm.

Счётчики никогда не бросают исключений: «0 планов» — корректный ответ.
Ошибки возникают только в генераторе (размерности) и исполнителе (индексы).
"""
from __future__ import annotations


class UpermError(Exception):
    pass


class InvalidDimension(UpermError, ValueError):
    """Недопустимые (N, L): нужно N ≥ 1 и 0 ≤ L ≤ N-1."""


class IndexOutOfRange(UpermError, IndexError):
    """План ссылается на позицию вне [0, N-1] последовательности."""


class InvalidPair(UpermError, ValueError):
    """Пара индексов не вида 0 ≤ first < second или не разбирается."""
