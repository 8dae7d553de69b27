from __future__ import annotations
import typing
from ..types import *
from .. import setops

if typing.TYPE_CHECKING:
    from ..sequence import Sequence, SortedSequence

class SetAccessor(Generic[T]):
    """
    set algebra over the distinct elements of two sequences.
    results are sorted and duplicate-free, so they come back as SortedSequence.
    `other` may be any iterable, another sequence, or None (treated as empty).
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def union(self, other: MaybeIterable[T]) -> 'SortedSequence[T]':
        """elements in either sequence"""
        from ..sequence import SortedSequence
        return SortedSequence(lambda: setops.union(self._sequence._get_data(), other))

    def intersect(self, other: MaybeIterable[T]) -> 'SortedSequence[T]':
        """elements in both sequences"""
        from ..sequence import SortedSequence
        return SortedSequence(lambda: setops.intersect(self._sequence._get_data(), other))

    def difference(self, other: MaybeIterable[T]) -> 'SortedSequence[T]':
        """elements in this sequence but not in other"""
        from ..sequence import SortedSequence
        return SortedSequence(lambda: setops.difference(self._sequence._get_data(), other))

    def symmetric_difference(self, other: MaybeIterable[T]) -> 'SortedSequence[T]':
        """elements in exactly one of the two sequences"""
        from ..sequence import SortedSequence
        return SortedSequence(lambda: setops.symmetric_difference(self._sequence._get_data(), other))

    def compare(self, other: MaybeIterable[T],
                on_left: Optional[Callback[T, Any]] = None,
                on_equal: Optional[Callback[T, Any]] = None,
                on_right: Optional[Callback[T, Any]] = None) -> 'Sequence[T]':
        """
        runs the merge callbacks immediately (EAGER).
        returns the original sequence to allow chaining.
        """
        setops.compare(self._sequence._get_data(), other, on_left, on_equal, on_right)
        return self._sequence
