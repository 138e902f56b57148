"""
Bounded top-k selection: the k smallest or largest elements of an iterable,
sorted, without sorting the whole iterable when that can be avoided.
"""

import logging
import itertools
from typing import Optional
from collections.abc import Iterable, Collection

from util import T, Predicate, less_than, sort_by, insertion_index, progress_bar


# If we're selecting at least 1/FULL_SORT_DIVISOR of a collection, it's faster to sort everything.
FULL_SORT_DIVISOR = 10


###############################################################################
## Selecting the smallest/largest elements

def select_bounded(source: Iterable[T], count: int, ascending: bool = True, by: Predicate[T] = less_than) -> list[T]:
    """
    The `count` smallest (if `ascending`) or largest elements of `source`, sorted by `by`.
    The result is always in increasing order, also for the largest elements.
    """
    if ascending:
        return min_count(source, count, by)
    else:
        return max_count(source, count, by)


def min_count(source: Iterable[T], count: int, by: Predicate[T] = less_than) -> list[T]:
    """
    Returns the `count` smallest elements of `source`, sorted by the predicate `by`.
    The order of equal elements is preserved, so if there are more equal elements
    than fit, the ones occurring first are kept.

    >>> min_count([7, 1, 6, 2, 8, 3, 9], 3)
    [1, 2, 3]

    If `count` is larger than the source, all elements are returned.
    Complexity: O(k log k + nk), or O(n log n) if k is a large part of a collection.
    """
    check_count(count)
    if count == 0:
        return []

    if isinstance(source, Collection):
        size = len(source)
        prefix = min(count, size)
        if prefix >= size // FULL_SORT_DIVISOR:
            logging.debug(f"Selecting {prefix} of {size} smallest elements by sorting everything")
            return sort_by(source, by)[:prefix]
        return _min_implementation(source, count, by, total=size-count)

    return _min_implementation(source, count, by)


def max_count(source: Iterable[T], count: int, by: Predicate[T] = less_than) -> list[T]:
    """
    Returns the `count` largest elements of `source`, sorted by the predicate `by`.
    Note that they are returned in increasing order, just as with `min_count`.
    If there are more equal elements than fit, the ones occurring last are kept.

    >>> max_count([7, 1, 6, 2, 8, 3, 9], 3)
    [7, 8, 9]
    """
    check_count(count)
    if count == 0:
        return []

    if isinstance(source, Collection):
        size = len(source)
        suffix = min(count, size)
        if suffix >= size // FULL_SORT_DIVISOR:
            logging.debug(f"Selecting {suffix} of {size} largest elements by sorting everything")
            return sort_by(source, by)[size-suffix:]
        return _max_implementation(source, count, by, total=size-count)

    return _max_implementation(source, count, by)


def check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"Cannot select a negative number of elements: {count}")


###############################################################################
## Incremental implementations

def _min_implementation(source: Iterable[T], count: int, by: Predicate[T], total: Optional[int] = None) -> list[T]:
    iterator = iter(source)
    result = sort_by(itertools.islice(iterator, count), by)
    if len(result) < count:
        return result

    with progress_bar(iterator, desc="Selecting minimum", total=total) as elements:
        for elem in elements:
            # To be part of the result, elem must be strictly less than the current maximum
            if not by(elem, result[-1]):
                continue
            index = insertion_index(result, elem, by)
            assert index < len(result)
            result.pop()
            result.insert(index, elem)
    return result


def _max_implementation(source: Iterable[T], count: int, by: Predicate[T], total: Optional[int] = None) -> list[T]:
    iterator = iter(source)
    result = sort_by(itertools.islice(iterator, count), by)
    if len(result) < count:
        return result

    with progress_bar(iterator, desc="Selecting maximum", total=total) as elements:
        for elem in elements:
            # To be part of the result, elem must be greater than or equal to the current minimum
            if by(elem, result[0]):
                continue
            index = insertion_index(result, elem, by)
            assert index > 0
            # Shift down the smaller elements in place, instead of a pop(0) followed by an insert
            result[0 : index-1] = result[1 : index]
            result[index-1] = elem
    return result
