"""Repeating the elements of a collection, forever or a fixed number of times."""

from typing import Union, overload
from collections.abc import Iterator, Sequence, Collection

from util import T


def cycled(elems: Collection[T]) -> Iterator[T]:
    """
    Repeat the elements forever. An empty collection gives an empty iterator,
    otherwise the iterator is infinite, so combine it with something finite:

    >>> list(zip(cycled(["even", "odd"]), range(3)))
    [('even', 0), ('odd', 1), ('even', 2)]
    """
    while True:
        empty = True
        for elem in elems:
            empty = False
            yield elem
        if empty:
            return


def cycled_times(elems: Sequence[T], times: int) -> 'FiniteCycle[T]':
    """Repeat the elements `times` times. Zero times gives an empty sequence."""
    return FiniteCycle(elems, times)


class FiniteCycle(Sequence[T]):
    """
    A sequence that repeats a base sequence a number of times.
    Nothing is copied, indexing goes straight to the base.
    """
    base: Sequence[T]
    times: int

    def __init__(self, base: Sequence[T], times: int) -> None:
        if times < 0:
            raise ValueError(f"Cannot repeat a sequence a negative number of times: {times}")
        self.base = base
        self.times = times

    def __len__(self) -> int:
        return len(self.base) * self.times

    def __iter__(self) -> Iterator[T]:
        for _ in range(self.times):
            yield from self.base

    @overload
    def __getitem__(self, i: int) -> T: ...
    @overload
    def __getitem__(self, i: slice) -> list[T]: ...

    def __getitem__(self, i: Union[int, slice]) -> Union[T, list[T]]:
        if isinstance(i, slice):
            return [self[j] for j in range(*i.indices(len(self)))]
        size = len(self)
        if i < 0:
            i += size
        if i < 0 or i >= size:
            raise IndexError("FiniteCycle index out of range")
        return self.base[i % len(self.base)]

    def __repr__(self) -> str:
        return f"FiniteCycle({self.base!r}, times={self.times})"
