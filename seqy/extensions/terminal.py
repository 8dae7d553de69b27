from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import functions, search

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class TerminalAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def _data(self) -> List[T]:
        return self._sequence._get_data() or []

    def list(self) -> MaybeList[T]:
        """convert to list; None when the sequence is absent"""
        data = self._sequence._get_data()
        return None if data is None else list(data)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._data())
        return sum(1 for x in self._data() if predicate(x))

    def any(self) -> bool:
        """true if there is at least one element"""
        return functions.any_(self._sequence._get_data())

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """get first element, or default when empty"""
        return functions.first(self._sequence._get_data(), default)

    def last(self, default: Optional[T] = None) -> Optional[T]:
        """get last element, or default when empty"""
        return functions.last(self._sequence._get_data(), default)

    def reduce(self, initial: U, accumulator: Callable[..., U]) -> U:
        """fold with accumulator(acc, element) or accumulator(acc, index, element)"""
        return functions.reduce(self._sequence._get_data(), initial, accumulator)

    def index(self, target: T) -> int:
        """position of target or NOT_FOUND. binary search on a sorted sequence."""
        if self._sequence.is_sorted:
            return search.sorted_index(self._sequence._get_data(), target)
        return search.index(self._sequence._get_data(), target)

    def contains(self, target: T) -> bool:
        """membership test. binary search on a sorted sequence."""
        return self.index(target) != NOT_FOUND
