import random
import unittest
from typing import Any
from collections.abc import Sequence, Callable

from util import Predicate, less_than


def by_value(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Compares (value, position) pairs on the value only, so that pairs with equal values are ties."""
    return a[0] < b[0]


class SequenceTest(unittest.TestCase):
    comparisons: int
    random: random.Random

    seed: int = 4711

    def setUp(self):
        super().setUp()
        self.comparisons = 0
        self.random = random.Random(self.seed)

    def counting(self, by: Predicate[Any] = less_than) -> Callable[[Any, Any], bool]:
        """
        Wraps the predicate so that every call is counted in *self.comparisons*.
        """
        def predicate(a: Any, b: Any) -> bool:
            self.comparisons += 1
            return by(a, b)
        return predicate

    def failing(self, after: int) -> Callable[[Any, Any], bool]:
        """
        A predicate that behaves like < for *after* calls, and then raises a RuntimeError.
        """
        def predicate(a: Any, b: Any) -> bool:
            self.comparisons += 1
            if self.comparisons > after:
                raise RuntimeError("predicate failed")
            return a < b
        return predicate

    def random_values(self, length: int, max_value: int = 100) -> list[int]:
        return [self.random.randint(0, max_value) for _ in range(length)]

    def random_ties(self, length: int, max_value: int = 10) -> list[tuple[int, int]]:
        """
        Random (value, position) pairs with lots of equal values.
        """
        return [(value, position) for position, value in enumerate(self.random_values(length, max_value))]

    def assert_sorted(self, elems: Sequence[Any], by: Predicate[Any] = less_than):
        """
        Asserts that no element is strictly smaller than the element before it.
        """
        for i in range(1, len(elems)):
            self.assertFalse(by(elems[i], elems[i-1]),
                             msg=f'Elements at position {i-1} and {i} are out of order: {elems[i-1]!r}, {elems[i]!r}')

    def assert_stable(self, elems: Sequence[tuple[int, int]]):
        """
        Asserts that (value, position) pairs with equal values come in increasing position order.
        """
        for i in range(1, len(elems)):
            if elems[i][0] == elems[i-1][0]:
                self.assertLess(elems[i-1][1], elems[i][1],
                                msg=f'Equal elements at position {i-1} and {i} were reordered: {elems[i-1]!r}, {elems[i]!r}')
