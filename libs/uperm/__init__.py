"""uperm — Уникальные планы перестановок пар индексов по уровням.

Использование:
  python -m libs.uperm.upermcli count 6
  python -m libs.uperm.upermcli plans 4 2
  python -m libs.uperm.upermcli apply 0-1,1-2 a,b,c,d
  python -m libs.uperm.upermcli decompose 3,0,1,2
"""
from .errors import UpermError, InvalidDimension, IndexOutOfRange, InvalidPair
from .counting import (
    count_pairs, count_pairs_with_min, count_pairs_below_max,
    count_plans_from_min, count_plans, level_table,
)
from .plans import (
    IndexPair, Plan,
    iter_plans, generate_plans, generate_all_plans,
    plan_for, level_of, format_plan,
)
from .executor import execute_plan, execute_plans
