from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> MaybeList[T]:
        """get the underlying data as a list, or None when absent"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, data_func: Callable[[], MaybeList[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: MaybeList[T] = None
        self._is_cached = False

    def _get_data(self) -> MaybeList[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    @property
    def is_absent(self) -> bool:
        return self._get_data() is None

    def __iter__(self) -> Iterator[T]:
        # absent iterates like empty
        return iter(self._get_data() or ())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._get_data()!r})"

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a chainable wrapper over an ordered sequence of orderable elements."""
    is_sorted = False

    def __init__(self, data_func: Callable[[], MaybeList[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.to = TerminalAccessor(self)

# --- sorted sequence class ---

class SortedSequence(Sequence[T]):
    """
    a sequence known to be in ascending order.
    only sort(), uniq() and the set operations build one; every other
    transformation returns a plain Sequence, so the tag can never go stale.
    searches through .to.index() / .to.contains() use binary search.
    """
    is_sorted = True
