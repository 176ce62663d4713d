"""upermcli.py — CLI для планов перестановок uperm.

Использование:
  python -m libs.uperm.upermcli <команда> [опции]

Команды:
  count N [--level L]                 — число планов по уровням
  plans N L [--values ...] [--json]   — все планы уровня L и их результат
  apply PLAN VALUES                   — применить план, напр. 0-1,1-2 a,b,c
  decompose PERM                      — канонический план перестановки 0..n-1
  demo [N]                            — демонстрация: уровни и планы L = N-1

Переменные окружения:
  UPERM_LIMIT — сколько планов печатать по умолчанию (0 = все), 64
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import os
import sys
from pathlib import Path

# Добавить корень репозитория в PYTHONPATH
_REPO = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(_REPO))

from libs.uperm.counting import count_plans, level_table
from libs.uperm.errors import InvalidPair, UpermError
from libs.uperm.executor import execute_plan, execute_plans
from libs.uperm.plans import (
    IndexPair, generate_plans, plan_for, level_of, format_plan,
)

LOGGER = logging.getLogger(__name__)

_DEFAULT_LIMIT = int(os.environ.get('UPERM_LIMIT', '64'))


# ─── Разбор аргументов ────────────────────────────────────────────────────────

def _parse_values(text: str) -> list:
    """'3,1,2' → [3, 1, 2]; нечисловые элементы остаются строками."""
    items = [s.strip() for s in text.split(',') if s.strip()]
    try:
        return [int(s) for s in items]
    except ValueError:
        return items


def _parse_plan(text: str) -> tuple[IndexPair, ...]:
    """'0-1,1-2' → ((0, 1), (1, 2)); пустая строка или '-' → ()."""
    if text.strip() in ('', '-'):
        return ()
    pairs = []
    for chunk in text.split(','):
        a, _, b = chunk.strip().partition('-')
        try:
            first, second = int(a), int(b)
        except ValueError:
            raise InvalidPair(f"Не удаётся разобрать пару {chunk!r} в {text!r}") from None
        pairs.append(IndexPair.of(first, second))
    return tuple(pairs)


def _fmt_values(values) -> str:
    return '[' + ', '.join(str(v) for v in values) + ']'


# ─── Команды ──────────────────────────────────────────────────────────────────

def cmd_count(n: int, level: int | None = None) -> int:
    if level is not None:
        print(f'n={n} L={level}: {count_plans(n, level)}')
        return 0
    table = level_table(n)
    for lv, c in enumerate(table):
        print(f'  L{lv}: {c}')
    print(f'  Σ = {sum(table)}   {n}! = {math.factorial(max(n, 0))}')
    return 0


def cmd_plans(n: int, level: int, values: list | None = None,
              limit: int = _DEFAULT_LIMIT, json_mode: bool = False) -> int:
    plans = generate_plans(n, level)
    if json_mode:
        data = {
            'n': n,
            'level': level,
            'count': len(plans),
            'plans': [[list(p) for p in plan] for plan in plans],
        }
        print(json.dumps(data, ensure_ascii=False))
        return 0

    values = list(range(n)) if values is None else values
    print(f'Исходные значения: {_fmt_values(values)}')
    print(f'Планы уровня {level}: {len(plans)}')
    shown = plans if limit <= 0 else plans[:limit]
    for plan, out in execute_plans(shown, values):
        print(f'{format_plan(plan)} = {_fmt_values(out)}')
    if len(shown) < len(plans):
        print(f'  … ещё {len(plans) - len(shown)}')
    return 0


def cmd_apply(plan_text: str, values_text: str) -> int:
    plan = _parse_plan(plan_text)
    values = _parse_values(values_text)
    out = execute_plan(plan, values)
    print(f'{format_plan(plan)} {_fmt_values(values)} = {_fmt_values(out)}')
    return 0


def cmd_decompose(perm_text: str) -> int:
    perm = _parse_values(perm_text)
    plan = plan_for(perm)
    print(f'{_fmt_values(perm)}: уровень {level_of(perm)}, {format_plan(plan)}')
    return 0


def cmd_demo(n: int = 6, limit: int = _DEFAULT_LIMIT) -> int:
    for lv, c in enumerate(level_table(n)):
        print(f'Уникальных планов L{lv}: {c}')
    print()
    return cmd_plans(n, n - 1, limit=limit)


# ─── Парсер ───────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='uperm',
        description=(
            'uperm — уникальные планы перестановок пар индексов по уровням.\n'
            '  uperm count 6             — число планов по уровням\n'
            '  uperm plans 4 2           — все планы уровня 2 для n=4\n'
            '  uperm apply 0-1,1-2 a,b,c — применить план\n'
            '  uperm decompose 3,0,1,2   — план для перестановки'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument('-v', '--verbose', action='store_true', help='Подробный вывод')

    sub = p.add_subparsers(dest='cmd', metavar='команда')

    cp = sub.add_parser('count', help='Число планов по уровням')
    cp.add_argument('n', type=int, help='Число элементов')
    cp.add_argument('--level', type=int, default=None, help='Только уровень L')

    pp = sub.add_parser('plans', help='Все планы уровня L')
    pp.add_argument('n', type=int, help='Число элементов')
    pp.add_argument('level', type=int, help='Уровень (число обменов)')
    pp.add_argument('--values', type=str, default=None,
                    help='Значения через запятую (по умолчанию 0..n-1)')
    pp.add_argument('--limit', type=int, default=_DEFAULT_LIMIT,
                    help='Сколько планов печатать (0 = все)')
    pp.add_argument('--json', dest='json_mode', action='store_true',
                    help='Вывод в JSON')

    ap = sub.add_parser('apply', help='Применить план к значениям')
    ap.add_argument('plan', help='Пары через запятую: 0-1,1-2')
    ap.add_argument('values', help='Значения через запятую')

    dp = sub.add_parser('decompose', help='Канонический план перестановки')
    dp.add_argument('perm', help='Перестановка 0..n-1 через запятую')

    mp = sub.add_parser('demo', help='Демонстрация')
    mp.add_argument('n', type=int, nargs='?', default=6, help='Число элементов')
    mp.add_argument('--limit', type=int, default=_DEFAULT_LIMIT)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.cmd is None:
        parser.print_help()
        return 0

    try:
        if args.cmd == 'count':
            return cmd_count(args.n, args.level)
        if args.cmd == 'plans':
            values = _parse_values(args.values) if args.values else None
            return cmd_plans(args.n, args.level, values,
                             limit=args.limit, json_mode=args.json_mode)
        if args.cmd == 'apply':
            return cmd_apply(args.plan, args.values)
        if args.cmd == 'decompose':
            return cmd_decompose(args.perm)
        if args.cmd == 'demo':
            return cmd_demo(args.n, limit=args.limit)
    except UpermError as exc:
        LOGGER.debug('команда %s завершилась ошибкой', args.cmd, exc_info=True)
        print(f'Ошибка: {exc}', file=sys.stderr)
        return 2

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
