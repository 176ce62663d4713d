"""executor.py — Применение плана к последовательности.

Исходная последовательность не изменяется: работаем с копией и
возвращаем её в том же типе. Изменяемые контейнеры (list, deque,
array.array, numpy.ndarray) копируются copy.copy и меняются на месте;
tuple, str и bytes собираются заново из списка.

Повторяющиеся обмены не сокращаются: P(0,1) P(0,1) честно выполняется
дважды.
"""
from __future__ import annotations

import copy
from typing import Iterable, Iterator, Sequence, TypeVar

from .errors import IndexOutOfRange

T = TypeVar('T')


def _check_plan(plan: Sequence[Sequence[int]], n: int) -> None:
    for k, pair in enumerate(plan):
        first, second = pair
        if not (0 <= first < n and 0 <= second < n):
            raise IndexOutOfRange(
                f"Пара #{k} ({first}, {second}) вне [0, {n - 1}]")


_IMMUTABLE = (tuple, str, bytes)


def _swap_all(plan, out) -> None:
    for first, second in plan:
        out[first], out[second] = out[second], out[first]


def _rebuild(seq, items: list):
    if isinstance(seq, str):
        return ''.join(items)
    if isinstance(seq, bytes):
        return bytes(items)
    return tuple(items)


def execute_plan(plan: Sequence[Sequence[int]], seq: Sequence[T]) -> Sequence[T]:
    """Скопировать seq и выполнить обмены плана в порядке хранения.

    Все индексы проверяются до первого обмена.
    """
    _check_plan(plan, len(seq))
    if isinstance(seq, _IMMUTABLE):
        items = list(seq)
        _swap_all(plan, items)
        return _rebuild(seq, items)
    out = copy.copy(seq)
    _swap_all(plan, out)
    return out


def execute_plans(plans: Iterable[Sequence[Sequence[int]]],
                  seq: Sequence[T]) -> Iterator[tuple]:
    """Для каждого плана выдать пару (план, результат)."""
    for plan in plans:
        yield plan, execute_plan(plan, seq)
