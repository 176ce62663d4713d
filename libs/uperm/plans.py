"""plans.py — Генерация уникальных планов перестановок пар индексов.

План уровня L — кортеж из L пар (i, j), i < j; пары применяются слева
направо в порядке хранения. Левые индексы строго возрастают вдоль плана:
после пары с левым индексом i позиции 0..i больше не трогаются, поэтому
разные планы дают разные перестановки.

Построение (по стадиям, b₀ = тождественная):
  b_i = b_{i-1} ∪ { P_ij(b_{i-1}) : j = i+1 … n-1 }
  b_{n-1} содержит все n! перестановок, а уровень плана = число пар в нём.

Порядок выдачи: первая пара перебирается внешним циклом (i по возрастанию,
затем j), остальные позиции — рекурсивно с нижней границей i+1.
"""
from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Sequence

from .counting import count_plans
from .errors import InvalidDimension, InvalidPair

LOGGER = logging.getLogger(__name__)


class IndexPair(NamedTuple):
    """Пара позиций для обмена: first < second."""
    first: int
    second: int

    @classmethod
    def of(cls, first: int, second: int) -> 'IndexPair':
        if not 0 <= first < second:
            raise InvalidPair(
                f"Нужно 0 ≤ first < second, получено ({first}, {second})")
        return cls(first, second)


Plan = tuple[IndexPair, ...]


def _check_dimensions(n: int, level: int) -> None:
    if n < 1:
        raise InvalidDimension(f"n должно быть ≥ 1, получено {n}")
    if not 0 <= level <= n - 1:
        raise InvalidDimension(
            f"Уровень должен быть в [0, {n - 1}] для n={n}, получено {level}")


def _walk(n: int, level: int, x: int, lo: int,
          scratch: list[IndexPair]) -> Iterator[Plan]:
    """Заполнить позиции x..level-1 буфера scratch и выдать готовые планы."""
    if x > level - 1:
        yield tuple(scratch)
        return
    remaining = level - x
    # оставить место для remaining-1 пар с бо́льшими левыми индексами
    for i in range(lo, n - remaining):
        for j in range(i + 1, n):
            scratch[x] = IndexPair(i, j)
            yield from _walk(n, level, x + 1, i + 1, scratch)


def iter_plans(n: int, level: int) -> Iterator[Plan]:
    """Ленивый перебор всех планов уровня level для n элементов."""
    _check_dimensions(n, level)
    return _walk(n, level, 0, 0, [IndexPair(0, 0)] * level)


def generate_plans(n: int, level: int) -> list[Plan]:
    """Все уникальные планы уровня level; длина = count_plans(n, level).

    Размер известен заранее, поэтому список выделяется сразу и
    заполняется по курсору.
    """
    _check_dimensions(n, level)
    size = count_plans(n, level)
    LOGGER.debug("generate_plans n=%d level=%d size=%d", n, level, size)

    out: list[Plan] = [()] * size
    k = 0
    for plan in _walk(n, level, 0, 0, [IndexPair(0, 0)] * level):
        out[k] = plan
        k += 1
    if k != size:
        raise RuntimeError(f"Сгенерировано {k} планов, ожидалось {size}")
    return out


def generate_all_plans(n: int) -> dict[int, list[Plan]]:
    """Планы всех уровней 0..n-1; всего n! штук."""
    _check_dimensions(n, 0)
    return {level: generate_plans(n, level) for level in range(n)}


# ── обратная задача ───────────────────────────────────────────────────────────

def plan_for(arrangement: Sequence[int]) -> Plan:
    """Канонический план, переводящий [0, 1, …, n-1] в arrangement.

    На стадии i позиция i получает своё итоговое значение одним обменом
    (или остаётся на месте), дальше её никто не трогает.
    """
    target = list(arrangement)
    n = len(target)
    if n < 1 or sorted(target) != list(range(n)):
        raise InvalidDimension(
            f"Ожидалась перестановка 0..{n - 1}, получено {target}")
    cur = list(range(n))
    where = list(range(n))      # where[v] = текущая позиция значения v
    pairs: list[IndexPair] = []
    for i in range(n - 1):
        v = target[i]
        if cur[i] == v:
            continue
        j = where[v]
        u = cur[i]
        cur[i], cur[j] = v, u
        where[v], where[u] = i, j
        pairs.append(IndexPair(i, j))
    return tuple(pairs)


def level_of(arrangement: Sequence[int]) -> int:
    """Уровень перестановки = n - число циклов."""
    return len(plan_for(arrangement))


def format_plan(plan: Sequence[Sequence[int]]) -> str:
    """'P(0,1) P(1,2)'; пустой план → 'P()'."""
    if not plan:
        return 'P()'
    return ' '.join(f'P({p[0]},{p[1]})' for p in plan)
