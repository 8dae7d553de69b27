from __future__ import annotations
import typing
from ..types import *
from ..callbacks import resolve
from .. import functions, setops, sorting

if typing.TYPE_CHECKING:
    from ..sequence import Sequence, SortedSequence

class _CoreOperations(Generic[T]):
    def map(self: 'Sequence[T]', func: Optional[Callback[T, U]]) -> 'Sequence[U]':
        """replace each element with func(element) or func(index, element)"""
        from ..sequence import Sequence
        if func is not None:
            # surface a bad callback now, not when the data is first read
            resolve(func, "map")
        return Sequence(lambda: functions.map_(self._get_data(), func))

    def filter(self: 'Sequence[T]', predicate: Callback[T, bool]) -> 'Sequence[T]':
        """keep elements for which the predicate is truthy"""
        from ..sequence import Sequence
        resolve(predicate, "filter")
        # always return a plain sequence, even from a sorted one
        return Sequence(lambda: functions.filter_(self._get_data(), predicate))

    def delete_if(self: 'Sequence[T]', predicate: Callback[T, bool]) -> 'Sequence[T]':
        """drop elements for which the predicate is truthy"""
        from ..sequence import Sequence
        resolve(predicate, "delete_if")
        return Sequence(lambda: functions.delete_if(self._get_data(), predicate))

    def add(self: 'Sequence[T]', *items: T) -> 'Sequence[T]':
        """append items to the end of the sequence"""
        from ..sequence import Sequence
        return Sequence(lambda: functions.add(self._get_data(), *items))

    def subtract(self: 'Sequence[T]', *items: T) -> 'Sequence[T]':
        """remove every occurrence of items, preserving order. never absent."""
        from ..sequence import Sequence
        return Sequence(lambda: setops.subtract(self._get_data(), *items))

    def sort(self: 'Sequence[T]') -> 'SortedSequence[T]':
        """sort ascending"""
        from ..sequence import SortedSequence
        return SortedSequence(lambda: sorting.sort(self._get_data()))

    def sort_by(self: 'Sequence[T]', key: KeySelector[T, K], reverse: bool = False) -> 'Sequence[T]':
        """
        sort by a key. the result is ordered by key, not by element, so it is
        not a SortedSequence and searches on it stay linear.
        """
        from ..sequence import Sequence
        return Sequence(lambda: sorting.sort_by(self._get_data(), key, reverse))

    def uniq(self: 'Sequence[T]') -> 'SortedSequence[T]':
        """sort and remove duplicates; a sorted sequence skips the re-sort"""
        from ..sequence import SortedSequence
        if self.is_sorted:
            return SortedSequence(lambda: sorting.sorted_uniq(self._get_data()))
        return SortedSequence(lambda: sorting.uniq(self._get_data()))

    distinct = uniq

    def each(self: 'Sequence[T]', func: Optional[Callback[T, Any]]) -> 'Sequence[T]':
        """
        calls func on each element for side-effects.
        this is an EAGER operation; returns the same sequence to allow chaining.
        """
        functions.each(self._get_data(), func)
        return self
