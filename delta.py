"""Finding where two sequences start to differ."""

import operator
import itertools
from typing import Any, Optional
from collections.abc import Iterable, Callable

from util import T

Equivalence = Callable[[T, T], bool]

_MISSING = object()


def first_delta(first: Iterable[T], second: Iterable[T],
                by: Equivalence[T] = operator.eq) -> tuple[Optional[T], Optional[T]]:
    """
    The first pair of elements that are not equivalent according to `by`.
    If one sequence is a proper prefix of the other, the exhausted side is None.
    If both are equivalent all the way, returns (None, None).

    >>> first_delta("abcd", "abxd")
    ('c', 'x')
    """
    for x, y in itertools.zip_longest(first, second, fillvalue=_MISSING):
        if x is _MISSING or y is _MISSING or not by(x, y):
            return _or_none(x), _or_none(y)
    return None, None


def diverges_from(first: Iterable[T], second: Iterable[T],
                  by: Equivalence[T] = operator.eq) -> Optional[int]:
    """The position where the sequences first differ, or None if they never do."""
    for i, (x, y) in enumerate(itertools.zip_longest(first, second, fillvalue=_MISSING)):
        if x is _MISSING or y is _MISSING or not by(x, y):
            return i
    return None


def _or_none(x: Any) -> Any:
    return None if x is _MISSING else x
