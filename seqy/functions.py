"""
element-wise helpers: map, each, filter, reduce and friends.

callbacks may take (index, element) or just (element); see callbacks.resolve.
callbacks run in index order and any exception they raise propagates as-is.
"""
from .types import *
from .callbacks import resolve, resolve_accumulator


def map_(seq: MaybeIterable[T], func: Optional[Callback[T, U]]) -> MaybeList[U]:
    """replace each element with func's result. None func copies the sequence."""
    f = resolve(func, "map") if func is not None else None
    if seq is None:
        return None
    if f is None:
        return list(seq)
    return [f(i, x) for i, x in enumerate(seq)]


def each(seq: MaybeIterable[T], func: Optional[Callback[T, Any]]) -> None:
    """call func on each element for its side effects"""
    if func is None:
        return
    f = resolve(func, "each")
    if seq is None:
        return
    for i, x in enumerate(seq):
        f(i, x)


def filter_(seq: MaybeIterable[T], func: Callback[T, bool]) -> List[T]:
    """elements for which func is truthy"""
    f = resolve(func, "filter")
    if seq is None:
        return []
    return [x for i, x in enumerate(seq) if f(i, x)]


def delete_if(seq: MaybeIterable[T], func: Callback[T, bool]) -> List[T]:
    """elements for which func is falsy"""
    f = resolve(func, "delete_if")
    if seq is None:
        return []
    return [x for i, x in enumerate(seq) if not f(i, x)]


def reduce(seq: MaybeIterable[T], initial: U, func: Callable[..., U]) -> U:
    """
    fold the sequence into one value, aka inject.
    func is f(acc, index, element) or f(acc, element).
    """
    f = resolve_accumulator(func, "reduce")
    if seq is None:
        return initial
    acc = initial
    for i, x in enumerate(seq):
        acc = f(acc, i, x)
    return acc


def add(seq: MaybeIterable[T], *items: T) -> MaybeList[T]:
    """a new list with items appended"""
    if seq is None and not items:
        return None
    return list(seq or []) + list(items)


def first(seq: MaybeIterable[T], default: Optional[T] = None) -> Optional[T]:
    for item in seq or ():
        return item
    return default


_MISSING = object()


def last(seq: MaybeIterable[T], default: Optional[T] = None) -> Optional[T]:
    if seq is None:
        return default
    if not isinstance(seq, SequenceType):
        # plain iterators have no [-1]; walk them once
        item = default
        for item in seq:
            pass
        return item
    return seq[-1] if seq else default


def any_(seq: Optional[Iterable[T]]) -> bool:
    """true when the sequence has at least one element"""
    if seq is None:
        return False
    return next(iter(seq), _MISSING) is not _MISSING
