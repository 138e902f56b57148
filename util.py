import logging
import operator
from typing import Any, Protocol, TypeVar, Optional
from collections.abc import Iterable, Iterator, Callable, Sequence
from abc import abstractmethod

from tqdm import tqdm


###############################################################################
## Type definitions

T = TypeVar('T')

Predicate = Callable[[T, T], bool]


class ComparableProtocol(Protocol):
    """Protocol for annotating comparable types."""
    @abstractmethod
    def __lt__(self, other: Any, /) -> bool: ...


###############################################################################
## Ordering predicates

# The predicates must be strict weak orderings: "a strictly precedes b".
# Nothing here checks that, it's up to the caller.

less_than: Predicate[Any] = operator.lt
greater_than: Predicate[Any] = operator.gt


def sort_key(by: Predicate[T]) -> Callable[[T], ComparableProtocol]:
    """
    Turn an ordering predicate into a key function for `sorted` and `list.sort`.
    Python's sort only ever calls `__lt__`, so every comparison is exactly one predicate call.
    """
    class PredicateKey:
        __slots__ = ('value',)

        def __init__(self, value: T) -> None:
            self.value = value

        def __lt__(self, other: 'PredicateKey') -> bool:
            return by(self.value, other.value)

    return PredicateKey


def sort_by(items: Iterable[T], by: Predicate[T]) -> list[T]:
    """Stable sort using an ordering predicate."""
    if by is less_than:
        return sorted(items)
    return sorted(items, key=sort_key(by))


###############################################################################
## Binary search

def partitioning_index(start: int, end: int, lookup: Callable[[int], T],
                       belongs_in_second_partition: Callable[[T], bool]) -> int:
    """
    The first index i in `start...end-1` such that `belongs_in_second_partition(lookup(i))`,
    or `end` if there is no such index. The range must already be partitioned:
    all elements where the check fails come before all elements where it holds.
    """
    while start < end:
        mid = (start + end) // 2
        if belongs_in_second_partition(lookup(mid)):
            end = mid
        else:
            start = mid + 1
    return start


def insertion_index(array: Sequence[T], elem: T, by: Predicate[T]) -> int:
    """
    Where to insert `elem` in the sorted `array` so that it ends up after all equal elements.
    This is what keeps insertions stable.
    """
    return partitioning_index(0, len(array), array.__getitem__, lambda other: by(elem, other))


###############################################################################
## Progress bar

class ProgressBar(Iterable[T]):
    """A simple progress bar wrapper class, doing nothing at all."""
    n: int = 0

    def __init__(self, iterable: Optional[Iterable[T]] = None, **_: Any) -> None:
        self._iter = iter(()) if iterable is None else iter(iterable)

    def __enter__(self) -> 'ProgressBar[T]':
        return self

    def __exit__(self, *_: Any) -> None:
        pass

    def __iter__(self) -> Iterator[T]:
        return self._iter

    def update(self, n: int) -> None:
        pass


_tqdm_bar_format = '{desc:20s} {percentage:3.0f}%|{bar}|{n_fmt:>7s}/{total_fmt} [{elapsed},{rate_fmt:>10s}{postfix}]'

def progress_bar(iterable: Optional[Iterable[T]] = None, desc: str = "", **kwargs: Any) -> ProgressBar[T]:
    """A tqdm progress bar if the root logger shows INFO messages, otherwise a dummy."""
    loglevel = logging.root.getEffectiveLevel()
    if loglevel > logging.INFO:
        return ProgressBar(iterable)
    kwargs.setdefault('leave', loglevel <= logging.DEBUG)
    kwargs.setdefault('unit_scale', True)
    kwargs.setdefault('bar_format', _tqdm_bar_format)
    return tqdm(iterable=iterable, desc=desc.ljust(20), **kwargs)  # type: ignore
