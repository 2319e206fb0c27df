import logging
from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import NamedTuple, Optional

from .comparators import Comparator, SortType, descending, natural
from .Config import *
from .sequence_ops import flip, resolve_range

logger = logging.getLogger(__name__)


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence, int, int, Comparator], None]
    stable: bool = False
    pure: Optional[Callable[[Sequence, Comparator], list]] = None
    max_N: int = DEFAULT_MAX_N
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Iterable[int]], bool] = lambda arr: all(i == v for i, v in enumerate(arr))

    def sort_with(self, seq: MutableSequence, cmp: Comparator, left: Optional[int] = None, right: Optional[int] = None) -> None:
        left, right = resolve_range(seq, left, right)
        logger.debug("%s: sorting %d elements [%d, %d]", self.name, right + 1 - left, left, right)
        self.func(seq, left, right, cmp)

    def sort_ascending(self, seq: MutableSequence, left: Optional[int] = None, right: Optional[int] = None) -> None:
        self.sort_with(seq, natural, left, right)

    def sort_descending(self, seq: MutableSequence, left: Optional[int] = None, right: Optional[int] = None) -> None:
        self.sort_with(seq, descending, left, right)

    def sort(self, seq: MutableSequence, sort_type: SortType = SortType.INCREASING, left: Optional[int] = None, right: Optional[int] = None) -> None:
        sort_type = SortType(sort_type)
        if (cmp := sort_type.comparator()) is not None:
            self.sort_with(seq, cmp, left, right)
            return
        left, right = resolve_range(seq, left, right)
        if sort_type is SortType.REVERSE_ORDER:
            flip(seq, left, right)

    def sorted(self, seq: Sequence, cmp: Comparator = natural) -> list:
        if self.pure is not None:
            return self.pure(seq, cmp)
        arr = list(seq)
        self.sort_with(arr, cmp)
        return arr
