from bisect import bisect_left
from .types import *


def index(seq: MaybeIterable[T], target: T) -> int:
    """position of the first element equal to target, or NOT_FOUND. o(n)."""
    if seq is None:
        return NOT_FOUND
    for i, item in enumerate(seq):
        if item == target:
            return i
    return NOT_FOUND


def contains(seq: MaybeIterable[T], target: T) -> bool:
    return index(seq, target) != NOT_FOUND


def sorted_index(seq: Optional[SequenceType[T]], target: T) -> int:
    """
    binary search for target in an ascending sequence. o(log n).
    duplicates are fine (the leftmost match is returned); an unsorted
    sequence gives wrong answers rather than an error.
    """
    if not seq:
        return NOT_FOUND
    idx = bisect_left(seq, target)
    # idx == len(seq) means target is above every element
    if idx < len(seq) and seq[idx] == target:
        return idx
    return NOT_FOUND


def sorted_contains(seq: Optional[SequenceType[T]], target: T) -> bool:
    return sorted_index(seq, target) != NOT_FOUND
