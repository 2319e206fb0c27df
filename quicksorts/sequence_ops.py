from collections.abc import Iterable, MutableSequence
from typing import Optional


class InvalidRangeError(IndexError):
    def __init__(self, left: int, right: int, length: int) -> None:
        super().__init__(f"Invalid range: [{left}, {right}] of a sequence with {length} elements")
        self.left = left
        self.right = right
        self.length = length


def swap(seq: MutableSequence, a: int, b: int) -> None:
    seq[a], seq[b] = seq[b], seq[a]


def flip(seq: MutableSequence, left: int, right: int) -> None:
    while left < right:
        swap(seq, left, right)
        left += 1
        right -= 1


def copy_range(seq: MutableSequence, left: int, right: int) -> list:
    return [seq[i] for i in range(left, right + 1)]


def splice_range(seq: MutableSequence, left: int, right: int, values: Iterable) -> None:
    values = list(values)
    if len(values) != right + 1 - left:
        raise ValueError(f"Cannot splice {len(values)} values into a range of {right + 1 - left} elements")
    for i, value in enumerate(values, left):
        seq[i] = value


def resolve_range(seq: MutableSequence, left: Optional[int] = None, right: Optional[int] = None) -> tuple[int, int]:
    "Fill in the whole-sequence defaults and reject ranges outside the sequence; `left == right + 1` is the empty range"
    n = len(seq)
    if left is None:
        left = 0
    if right is None:
        right = n - 1
    if not 0 <= left <= right + 1 <= n:
        raise InvalidRangeError(left, right, n)
    return left, right
