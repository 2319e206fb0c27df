from collections.abc import MutableSequence

from ..comparators import Comparator
from ..sequence_ops import swap
from ..SortingAlgorithm import SortingAlgorithm


def partition3(seq: MutableSequence, left: int, right: int, cmp: Comparator) -> tuple[int, int]:
    """Dutch national flag partition of `seq[left..=right]` around `seq[right]`.

    Returns `(i, j)`: `seq[..=i]` precedes the pivot, `seq[j..]` follows it, everything in between ties with it.
    """
    if right + 1 - left <= 2:
        if cmp(seq[right], seq[left]) < 0:
            swap(seq, right, left)
        return left, right
    mid = left
    pivot = seq[right]
    while mid <= right:
        c = cmp(seq[mid], pivot)
        if c < 0:
            swap(seq, left, mid)
            left += 1
            mid += 1
        elif c == 0:
            mid += 1
        else:
            swap(seq, mid, right)
            right -= 1
    return left - 1, mid


def quick3(seq: MutableSequence, left: int, right: int, cmp: Comparator) -> None:
    while left < right:
        i, j = partition3(seq, left, right, cmp)
        # the tie band is empty only if cmp is not a total order
        i, j = min(i, right - 1), max(j, left + 1)
        if i - left < right - j:
            quick3(seq, left, i, cmp)
            left = j
        else:
            quick3(seq, j, right, cmp)
            right = i


algorithm = SortingAlgorithm("3-way quick sort", quick3, max_N=8)
