from collections.abc import Callable, MutableSequence, Sequence
from random import Random
from typing import Any, Optional

from ..comparators import Comparator, natural
from ..sequence_ops import copy_range, splice_range
from ..SortingAlgorithm import SortingAlgorithm


def midpoint(n: int) -> int:
    return n // 2


def random_pivot(seed: Optional[int] = None) -> Callable[[int], int]:
    r = Random(seed)
    return lambda n: r.randrange(n)


def stable_recursive(items: Sequence, cmp: Comparator, choose_pivot: Callable[[int], int] = midpoint) -> list:
    """Returns `sorted(smaller) + [pivot] + sorted(greater)` without touching `items`.

    The sub-lists wait on an explicit stack, so unbalanced splits cost time but never Python call depth.
    """
    result = []
    pending: list[tuple[bool, Any]] = [(False, items)]
    while pending:
        is_pivot, part = pending.pop()
        if is_pivot:
            result.append(part)
            continue
        n = len(part)
        if n <= 1:
            result.extend(part)
            continue
        mid = choose_pivot(n)
        pivot = part[mid]
        smaller, greater = [], []
        for i, value in enumerate(part):
            if i == mid:
                continue
            c = cmp(value, pivot)
            if c < 0 or (c == 0 and i < mid):  # ties keep their side of the pivot
                smaller.append(value)
            else:
                greater.append(value)
        pending.append((False, greater))
        pending.append((True, pivot))
        pending.append((False, smaller))
    return result


def stable_sorted(seq: Sequence, cmp: Comparator = natural, choose_pivot: Callable[[int], int] = midpoint) -> list:
    return stable_recursive(seq, cmp, choose_pivot)


def stable_quick(seq: MutableSequence, left: int, right: int, cmp: Comparator, choose_pivot: Callable[[int], int] = midpoint) -> None:
    if left >= right:
        return
    splice_range(seq, left, right, stable_recursive(copy_range(seq, left, right), cmp, choose_pivot))


algorithm = SortingAlgorithm("stable quick sort", stable_quick, stable=True, pure=stable_sorted, max_N=8)
