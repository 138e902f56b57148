import sys
import logging
from enum import Enum
from collections.abc import Iterable, Iterator, Sequence, Sized

from util import T, Predicate, less_than
import merge

fast_merge = None
try:
    import fast_merge  # type: ignore
except ModuleNotFoundError:
    print("Module 'fast_merge' not found. "
          "To install, run: 'python setup.py build_ext --inplace'. "
          "Defaulting to an internal implementation.\n",
          file=sys.stderr)


################################################################################
## Which parts of the merge to keep: union, intersection, difference, ...

class MergerSubset(Enum):
    """
    Which elements of a merge of two sorted sequences A and B to keep.
    The first eight are all combinations of keeping elements exclusive to A,
    elements exclusive to B, and elements shared by both.
    SUM is the multiset union: shared elements are kept from both A and B.
    """
    NONE = 0
    FIRST_WITHOUT_SECOND = 1
    SECOND_WITHOUT_FIRST = 2
    SYMMETRIC_DIFFERENCE = 3
    INTERSECTION = 4
    FIRST = 5
    SECOND = 6
    UNION = 7
    SUM = 8

    @staticmethod
    def from_flags(keep_exclusives_to_first: bool, keep_exclusives_to_second: bool,
                   keep_shared_elements: bool) -> 'MergerSubset':
        return MergerSubset(
            keep_exclusives_to_first | keep_exclusives_to_second << 1 | keep_shared_elements << 2
        )

    def which_to_take(self) -> tuple[bool, bool, bool]:
        """Compute take_first/take_second/take_common parameters (see comment in merge.merge)."""
        if self is MergerSubset.SUM:
            return (True, True, True)
        return (bool(self.value & 1), bool(self.value & 2), bool(self.value & 4))

    @property
    def emits_exclusives_to_first(self) -> bool:
        return self.which_to_take()[0]

    @property
    def emits_exclusives_to_second(self) -> bool:
        return self.which_to_take()[1]

    @property
    def emits_shared_elements(self) -> bool:
        return self.which_to_take()[2]

    @property
    def emits_shared_elements_twice(self) -> bool:
        return self is MergerSubset.SUM

    def max_merge_size(self, size1: int, size2: int) -> int:
        """Return the maximum size of the merge of two sequences."""
        return {
            MergerSubset.NONE:                 0,
            MergerSubset.FIRST_WITHOUT_SECOND: size1,
            MergerSubset.SECOND_WITHOUT_FIRST: size2,
            MergerSubset.SYMMETRIC_DIFFERENCE: size1 + size2,
            MergerSubset.INTERSECTION:         min(size1, size2),
            MergerSubset.FIRST:                size1,
            MergerSubset.SECOND:               size2,
            MergerSubset.UNION:                size1 + size2,
            MergerSubset.SUM:                  size1 + size2,
        }[self]

    def min_merge_size(self, size1: int, size2: int) -> int:
        """Return the minimum size of the merge of two sequences."""
        return {
            MergerSubset.FIRST:  size1,
            MergerSubset.SECOND: size2,
            MergerSubset.UNION:  max(size1, size2),
            MergerSubset.SUM:    size1 + size2,
        }.get(self, 0)


################################################################################
## Lazy merging

_EXHAUSTED = object()


class MergeSortedSets(Iterable[T]):
    """
    The lazy merge of two iterables that are sorted by the predicate `by`,
    keeping only the parts given by `subset`. Nothing is read from the inputs until
    the merge is iterated over, and then only as much as is needed for each element.
    The inputs may be infinite.

    Iterating twice only works if both inputs can be iterated twice.
    """
    first: Iterable[T]
    second: Iterable[T]
    subset: MergerSubset
    by: Predicate[T]

    def __init__(self, first: Iterable[T], second: Iterable[T],
                 subset: MergerSubset = MergerSubset.SUM, by: Predicate[T] = less_than) -> None:
        self.first = first
        self.second = second
        self.subset = subset
        self.by = by

    def __repr__(self) -> str:
        return f"MergeSortedSets({self.first!r}, {self.second!r}, {self.subset})"

    def __length_hint__(self) -> int:
        return self.underestimated_count()

    def underestimated_count(self) -> int:
        """A lower bound of the number of elements, 0 if the inputs have no length."""
        if isinstance(self.first, Sized) and isinstance(self.second, Sized):
            return self.subset.min_merge_size(len(self.first), len(self.second))
        return 0

    def __iter__(self) -> Iterator[T]:
        take_first, take_second, take_common = self.subset.which_to_take()
        take_both = self.subset.emits_shared_elements_twice
        if not (take_first or take_second or take_common):
            return
        by = self.by
        first = iter(self.first)
        second = iter(self.second)
        x = next(first, _EXHAUSTED)
        y = next(second, _EXHAUSTED)

        while x is not _EXHAUSTED and y is not _EXHAUSTED:
            if by(x, y):
                if take_first:
                    yield x
                x = next(first, _EXHAUSTED)

            elif by(y, x):
                if take_second:
                    yield y
                y = next(second, _EXHAUSTED)

            else:
                if take_common:
                    yield x
                    if take_both:
                        yield y
                x = next(first, _EXHAUSTED)
                y = next(second, _EXHAUSTED)

        # At most one of the inputs has elements left, and they are all exclusive
        if take_first and x is not _EXHAUSTED:
            yield x
            yield from first
        if take_second and y is not _EXHAUSTED:
            yield y
            yield from second


def merge_sorted(first: Iterable[T], second: Iterable[T], by: Predicate[T] = less_than) -> MergeSortedSets[T]:
    """
    Lazily merge two sorted iterables, keeping all elements from both.

    >>> list(merge_sorted([10, 4, 0, 0, -3], [20, 6, 1, -1, -5], by=lambda a, b: a > b))
    [20, 10, 6, 4, 1, 0, 0, -1, -3, -5]
    """
    return MergeSortedSets(first, second, MergerSubset.SUM, by)


def merge_sorted_sets(first: Iterable[T], second: Iterable[T],
                      retaining: MergerSubset = MergerSubset.SUM, by: Predicate[T] = less_than) -> MergeSortedSets[T]:
    """
    Lazily merge two sorted iterables, keeping the elements that `retaining` says.

    >>> list(merge_sorted_sets([0, 1, 1, 2, 5, 10], [-1, 0, 1, 2, 2, 7, 10, 20], MergerSubset.INTERSECTION))
    [0, 1, 2, 10]
    """
    return MergeSortedSets(first, second, retaining, by)


################################################################################
## Eager merging

def collect_merged(first: Iterable[T], second: Iterable[T], by: Predicate[T] = less_than,
                   use_internal: bool = False) -> list[T]:
    """Merge two sorted iterables into a list, keeping all elements from both."""
    return collect_merged_sets(first, second, MergerSubset.SUM, by, use_internal)


def collect_merged_sets(first: Iterable[T], second: Iterable[T],
                        retaining: MergerSubset = MergerSubset.SUM, by: Predicate[T] = less_than,
                        use_internal: bool = False) -> list[T]:
    """
    Merge two sorted iterables into a list, keeping the elements that `retaining` says.
    Uses the compiled `fast_merge` module if it's installed, unless `use_internal` is set.
    """
    take_first, take_second, take_common = retaining.which_to_take()
    if not (take_first or take_second or take_common):
        return []

    arr1 = as_sequence(first)
    arr2 = as_sequence(second)
    result: list[T] = []
    merge_module = merge
    if not use_internal and fast_merge:
        merge_module = fast_merge
    final_size = merge_module.merge(  # type: ignore
        arr1, 0, len(arr1),
        arr2, 0, len(arr2),
        result, take_first, take_second, take_common,
        retaining.emits_shared_elements_twice, by,
    )
    assert final_size == len(result)
    assert retaining.min_merge_size(len(arr1), len(arr2)) <= final_size <= retaining.max_merge_size(len(arr1), len(arr2))
    logging.debug(f"Merged {len(arr1)} and {len(arr2)} elements into {final_size}, "
                  f"retaining {retaining.name}, using {'internal' if merge_module is merge else 'external'} merge")
    return result


def as_sequence(elems: Iterable[T]) -> Sequence[T]:
    if isinstance(elems, Sequence):
        return elems
    return list(elems)
