
from collections.abc import Sequence

from util import T, Predicate


def merge(
        arr1: Sequence[T], start1: int, length1: int,
        arr2: Sequence[T], start2: int, length2: int,
        result: list[T], take_first: bool, take_second: bool, take_common: bool,
        take_both: bool, by: Predicate[T],
    ) -> int:
    """
    Merge two arrays A (arr1) and B (arr2), both sorted by the predicate `by`.
    The merged elements are appended to the result list.
    Returns the number of appended elements.

    * If take_first  is True then elements in A - B are included.
    * If take_second is True then elements in B - A are included.
    * If take_common is True then elements in A & B are included (the one from A).
    * If take_both   is True then elements in A & B are included twice (first A, then B).

    You can get the following set operations (among others):

    Operation              take_first  take_second  take_common  take_both
    union        (A | B)   True        True         True         False
    sum          (A + B)   True        True         True         True
    intersection (A & B)   False       False        True         False
    difference   (A - B)   True        False        False        False
    """

    i = start1
    j = start2
    k = 0
    end1 = start1 + length1
    end2 = start2 + length2

    if i < end1 and j < end2:
        x = arr1[i]
        y = arr2[j]

        while True:
            if by(x, y):
                if take_first:
                    result.append(x)
                    k += 1
                i += 1
                if i >= end1:
                    break
                x = arr1[i]

            elif by(y, x):
                if take_second:
                    result.append(y)
                    k += 1
                j += 1
                if j >= end2:
                    break
                y = arr2[j]

            else:
                if take_common:
                    result.append(x)
                    k += 1
                    if take_both:
                        result.append(y)
                        k += 1
                i += 1
                j += 1
                if i >= end1 or j >= end2:
                    break
                x = arr1[i]
                y = arr2[j]

    if take_first:
        while i < end1:
            result.append(arr1[i])
            k += 1
            i += 1

    if take_second:
        while j < end2:
            result.append(arr2[j])
            k += 1
            j += 1

    return k
