from typing import TypeVar
from collections.abc import Iterable, Callable, Hashable

from util import T

H = TypeVar('H', bound=Hashable)


def uniqued(elems: Iterable[H]) -> list[H]:
    """
    The unique elements, in the order of their first occurrence.

    >>> uniqued(["dog", "pig", "cat", "ox", "dog", "cat"])
    ['dog', 'pig', 'cat', 'ox']
    """
    return uniqued_on(elems, lambda elem: elem)


def uniqued_on(elems: Iterable[T], projection: Callable[[T], Hashable]) -> list[T]:
    """The elements with a unique projection, keeping the first element for each projected value."""
    seen: set[Hashable] = set()
    result: list[T] = []
    for elem in elems:
        key = projection(elem)
        if key not in seen:
            seen.add(key)
            result.append(elem)
    return result
