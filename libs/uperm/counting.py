"""counting.py — Число уникальных пар и планов перестановок.

Все функции чистые и тотальные: для пустых или некорректных диапазонов
возвращают 0, а не бросают исключение. Результат можно вычислить заранее,
чтобы знать точный размер коллекции планов до генерации.

Для N = 4:
  L0 : 1
  L1 : P01 P02 P03 P12 P13 P23                     → 6
  L2 : P12·{P01 P02 P03}  P13·{P01 P02 P03}
       P23·{P01 P02 P03 P12 P13}                   → 11
  L3 : P23·{P12·{P01 P02 P03}  P13·{P01 P02 P03}}  → 6
  Σ = 24 = 4!

count_plans(n, L) совпадает с числом Стирлинга первого рода c(n, n-L):
перестановки с n-L циклами.
"""
from __future__ import annotations

from functools import lru_cache


# ── пары индексов ─────────────────────────────────────────────────────────────

def count_pairs(n: int) -> int:
    """Число пар (i, j), i < j, среди n индексов: n·(n-1)/2."""
    return n * (n - 1) // 2 if n > 0 else 0


def count_pairs_with_min(n: int, lo: int) -> int:
    """Число пар, у которых меньший индекс ≥ lo."""
    if n - lo > 0 and lo <= n - 2:
        return (n - lo) * (n - lo - 1) // 2
    return 0


def count_pairs_below_max(n: int, hi: int) -> int:
    """Число пар, у которых меньший индекс < hi.

    Σ_{i<hi} (n-1-i) = (2·n·hi - hi² - hi)/2; hi > n ничего не добавляет.
    """
    if n <= 0 or hi <= 0:
        return 0
    hi = min(hi, n)
    return (2 * n * hi - hi * hi - hi) // 2


# ── планы ─────────────────────────────────────────────────────────────────────

_CACHE_SIZE = 1024


def _from_min_row(n: int, level: int, start: int) -> list[int]:
    """row[lo - start] = число планов уровня level после пары с левым индексом lo.

    Таблица строится снизу вверх по уровням, lo = start … n-2:
      f(0, lo) = 1
      f(L, lo) = Σ_{i=lo+1}^{n-2} (n-i-1)·f(L-1, i)
    На уровне L ненулевые значения только при lo ≤ n-2-L.
    """
    top = n - 2
    row = [1] * (top - start + 1)
    for lv in range(1, level + 1):
        nxt = [0] * len(row)
        acc = 0
        for lo in range(min(top - lv + 1, top), start - 1, -1):
            nxt[lo - start] = acc
            acc += (n - lo - 1) * row[lo - start]
        row = nxt
    return row


@lru_cache(maxsize=_CACHE_SIZE)
def count_plans_from_min(n: int, level: int, lo: int) -> int:
    """Число планов уровня level, продолжающих пару с левым индексом lo.

    Следующая пара обязана иметь левый индекс i > lo; для каждого i есть
    n-i-1 вариантов правого индекса. lo < 0 означает «без нижней границы».
    """
    if level == 0:
        return 1
    if level < 0 or lo > n - 2:
        return 0
    if lo < 0:
        return count_plans(n, level)
    # level пар с различными левыми индексами из lo+1 … n-2
    if level > n - 2 - lo:
        return 0
    return _from_min_row(n, level, lo)[0]


@lru_cache(maxsize=_CACHE_SIZE)
def count_plans(n: int, level: int) -> int:
    """Число уникальных планов из ровно level перестановок пар для n элементов."""
    if level == 0:
        return 1
    if level < 0 or level > n - 1:
        return 0
    row = _from_min_row(n, level - 1, 0)
    return sum((n - i - 1) * row[i] for i in range(n - 1))


def level_table(n: int) -> list[int]:
    """[count_plans(n, 0), …, count_plans(n, n-1)]; сумма равна n!."""
    return [count_plans(n, level) for level in range(max(n, 1))]
