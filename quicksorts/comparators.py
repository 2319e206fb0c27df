"Three-way comparators: negative if `a` goes before `b`, zero on a tie, positive if `a` goes after `b`"
from collections.abc import Callable
from enum import Enum
from typing import Any, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], int]
Predicate = Callable[[T, T], bool]


def natural(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse(cmp: Comparator) -> Comparator:
    if (original := getattr(cmp, "_reversed_of", None)) is not None:
        return original

    def reversed_cmp(a, b) -> int:
        return cmp(b, a)

    reversed_cmp._reversed_of = cmp
    return reversed_cmp


def by_key(key: Callable[[T], K], cmp: Comparator[K] = natural) -> Comparator[T]:
    def key_cmp(a: T, b: T) -> int:
        return cmp(key(a), key(b))

    return key_cmp


def from_predicate(pred: Predicate) -> Comparator:
    """Adapt a "does `a` have to move after `b`" predicate, e.g. `lambda a, b: a > b` for ascending order.

    Predicates that also hold on ties (`>=`) are accepted, a pair counts as a tie whenever the predicate holds both ways.
    """

    def pred_cmp(a, b) -> int:
        after, before = pred(a, b), pred(b, a)
        if after == before:
            return 0
        return 1 if after else -1

    return pred_cmp


def to_predicate(cmp: Comparator, or_equal: bool = False) -> Predicate:
    'Back to the "move after" predicate form for predicate-based callers; `or_equal` makes ties hold too'
    if or_equal:
        return lambda a, b: cmp(a, b) >= 0
    return lambda a, b: cmp(a, b) > 0


def equal(cmp: Comparator) -> Predicate:
    "Tie test for predicate-based callers"
    return lambda a, b: cmp(a, b) == 0


descending = reverse(natural)


class SortType(Enum):
    INCREASING = 1
    DECREASING = 2
    DO_NOT_CHANGE_IT = 3
    REVERSE_ORDER = 4

    def comparator(self) -> Optional[Comparator]:
        if self is SortType.INCREASING:
            return natural
        if self is SortType.DECREASING:
            return descending
        return None
