"""Тесты libs/uperm/plans.py — генерация планов и обратная задача."""
import itertools
import math
import sys
import os
import unittest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from libs.uperm.counting import count_plans
from libs.uperm.errors import InvalidDimension, InvalidPair
from libs.uperm.executor import execute_plan
from libs.uperm.plans import (
    IndexPair, iter_plans, generate_plans, generate_all_plans,
    plan_for, level_of, format_plan,
)


class TestIndexPair(unittest.TestCase):
    def test_fields(self):
        p = IndexPair(1, 3)
        self.assertEqual(p.first, 1)
        self.assertEqual(p.second, 3)
        self.assertEqual(p, (1, 3))

    def test_of_valid(self):
        self.assertEqual(IndexPair.of(0, 2), IndexPair(0, 2))

    def test_of_invalid(self):
        for a, b in [(2, 1), (1, 1), (-1, 2)]:
            with self.assertRaises(InvalidPair):
                IndexPair.of(a, b)

    def test_of_invalid_is_value_error(self):
        with self.assertRaises(ValueError):
            IndexPair.of(3, 0)

    def test_immutable(self):
        p = IndexPair(0, 1)
        with self.assertRaises(AttributeError):
            p.first = 5


class TestGeneratePlans(unittest.TestCase):
    def test_level_zero(self):
        """L=0: единственный пустой план."""
        for n in range(1, 6):
            self.assertEqual(generate_plans(n, 0), [()])

    def test_n4_level1(self):
        plans = generate_plans(4, 1)
        self.assertEqual(plans, [((0, 1),), ((0, 2),), ((0, 3),),
                                 ((1, 2),), ((1, 3),), ((2, 3),)])

    def test_n4_level3(self):
        """L3 : P23·{P12·{P01 P02 P03}  P13·{P01 P02 P03}}."""
        plans = generate_plans(4, 3)
        self.assertEqual(len(plans), 6)
        for plan in plans:
            self.assertIn(plan[0], [(0, 1), (0, 2), (0, 3)])
            self.assertIn(plan[1], [(1, 2), (1, 3)])
            self.assertEqual(plan[2], (2, 3))

    def test_n3_level2_order(self):
        self.assertEqual(generate_plans(3, 2),
                         [((0, 1), (1, 2)), ((0, 2), (1, 2))])

    def test_size_matches_count(self):
        for n in range(1, 7):
            for lv in range(n):
                self.assertEqual(len(generate_plans(n, lv)), count_plans(n, lv))

    def test_unique(self):
        for n in range(1, 7):
            for lv in range(n):
                plans = generate_plans(n, lv)
                self.assertEqual(len(set(plans)), len(plans))

    def test_pairs_valid(self):
        """0 ≤ i < j ≤ n-1 для каждой пары каждого плана."""
        n = 6
        for lv in range(n):
            for plan in generate_plans(n, lv):
                self.assertEqual(len(plan), lv)
                for i, j in plan:
                    self.assertTrue(0 <= i < j <= n - 1)

    def test_left_indices_increase(self):
        for plan in generate_plans(6, 3):
            lefts = [p.first for p in plan]
            self.assertEqual(lefts, sorted(set(lefts)))

    def test_pairs_are_index_pairs(self):
        for plan in generate_plans(4, 2):
            for p in plan:
                self.assertIsInstance(p, IndexPair)

    def test_distinct_arrangements(self):
        """Все планы всех уровней дают n! разных перестановок."""
        n = 5
        seen = set()
        for lv in range(n):
            for plan in generate_plans(n, lv):
                seen.add(tuple(execute_plan(plan, list(range(n)))))
        self.assertEqual(len(seen), math.factorial(n))

    def test_invalid_dimensions(self):
        for n, lv in [(0, 0), (-1, 0), (4, 4), (4, -1), (3, 7), (1, 1)]:
            with self.assertRaises(InvalidDimension):
                generate_plans(n, lv)

    def test_invalid_is_value_error(self):
        with self.assertRaises(ValueError):
            generate_plans(2, 2)


class TestIterPlans(unittest.TestCase):
    def test_same_as_generate(self):
        for n in range(1, 6):
            for lv in range(n):
                self.assertEqual(list(iter_plans(n, lv)), generate_plans(n, lv))

    def test_validates_eagerly(self):
        """Ошибка сразу при вызове, а не при первом next()."""
        with self.assertRaises(InvalidDimension):
            iter_plans(3, 3)

    def test_lazy(self):
        it = iter_plans(9, 4)
        first = next(it)
        self.assertEqual(first, ((0, 1), (1, 2), (2, 3), (3, 4)))


class TestGenerateAll(unittest.TestCase):
    def test_total_factorial(self):
        for n in range(1, 6):
            allp = generate_all_plans(n)
            self.assertEqual(sorted(allp), list(range(n)))
            self.assertEqual(sum(len(v) for v in allp.values()), math.factorial(n))

    def test_invalid(self):
        with self.assertRaises(InvalidDimension):
            generate_all_plans(0)


class TestPlanFor(unittest.TestCase):
    def test_identity(self):
        self.assertEqual(plan_for([0, 1, 2, 3]), ())
        self.assertEqual(level_of([0, 1, 2, 3]), 0)

    def test_known(self):
        self.assertEqual(plan_for([1, 2, 0, 3]), ((0, 1), (1, 2)))
        self.assertEqual(plan_for([1, 0, 2, 3]), ((0, 1),))

    def test_roundtrip_all(self):
        """plan_for(σ) выполняется в σ и совпадает со сгенерированным планом."""
        n = 5
        by_level = generate_all_plans(n)
        for perm in itertools.permutations(range(n)):
            plan = plan_for(perm)
            self.assertEqual(tuple(execute_plan(plan, list(range(n)))), perm)
            self.assertIn(plan, by_level[len(plan)])

    def test_level_is_n_minus_cycles(self):
        self.assertEqual(level_of([1, 2, 3, 0]), 3)     # один 4-цикл
        self.assertEqual(level_of([1, 0, 3, 2]), 2)     # два 2-цикла

    def test_not_permutation(self):
        for bad in ([], [0, 0, 1], [1, 2, 3], [0, 2]):
            with self.assertRaises(InvalidDimension):
                plan_for(bad)


class TestFormatPlan(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_plan(((0, 1), (1, 2))), 'P(0,1) P(1,2)')

    def test_empty(self):
        self.assertEqual(format_plan(()), 'P()')


if __name__ == '__main__':
    unittest.main()
