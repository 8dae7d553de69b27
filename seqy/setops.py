"""
set-algebra engine.

every operation normalises both inputs with uniq() and then walks them once
with two cursors (a sorted merge), instead of comparing all pairs.
"""
from .types import *
from .callbacks import resolve
from .sorting import uniq


def _noop(i: int, item: Any) -> None:
    pass


def compare(s1: MaybeIterable[T], s2: MaybeIterable[T],
            on_left: Optional[Callback[T, Any]] = None,
            on_equal: Optional[Callback[T, Any]] = None,
            on_right: Optional[Callback[T, Any]] = None) -> None:
    """
    merge two sequences and classify every distinct element.

    on_left(x) is called for elements only in s1, on_right(x) for elements only
    in s2 and on_equal(x) for elements in both. each callback sees its elements
    in ascending order. omitted callbacks are no-ops. callbacks may also take
    (index, element), where index is the position in the normalised s1 (left
    and equal) or normalised s2 (right).
    """
    left = resolve(on_left, "compare") if on_left is not None else _noop
    equal = resolve(on_equal, "compare") if on_equal is not None else _noop
    right = resolve(on_right, "compare") if on_right is not None else _noop

    a = uniq(s1) or []
    b = uniq(s2) or []
    i, j = 0, 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            left(i, a[i])
            i += 1
        elif a[i] > b[j]:
            right(j, b[j])
            j += 1
        else:
            equal(i, a[i])
            i += 1
            j += 1

    # one side is exhausted; drain the other
    for k in range(i, len(a)):
        left(k, a[k])
    for k in range(j, len(b)):
        right(k, b[k])


def union(s1: MaybeIterable[T], s2: MaybeIterable[T]) -> List[T]:
    """sorted, distinct elements that are in s1 or s2"""
    result: List[T] = []
    compare(s1, s2, result.append, result.append, result.append)
    return result


def intersect(s1: MaybeIterable[T], s2: MaybeIterable[T]) -> List[T]:
    """sorted, distinct elements that are in both s1 and s2"""
    result: List[T] = []
    compare(s1, s2, on_equal=result.append)
    return result


def difference(s1: MaybeIterable[T], s2: MaybeIterable[T]) -> List[T]:
    """sorted, distinct elements of s1 that are not in s2"""
    result: List[T] = []
    compare(s1, s2, on_left=result.append)
    return result


def symmetric_difference(s1: MaybeIterable[T], s2: MaybeIterable[T]) -> List[T]:
    """sorted, distinct elements that are in exactly one of s1 and s2"""
    result: List[T] = []
    compare(s1, s2, on_left=result.append, on_right=result.append)
    return result


def subtract(seq: MaybeIterable[T], *items: T) -> List[T]:
    """
    remove every occurrence of items from seq, keeping the original order and
    any duplicates that survive. unlike difference(), nothing is sorted.
    items must be hashable; use difference() for orderable but unhashable values.
    """
    excluded = set(items)
    if seq is None:
        return []
    return [x for x in seq if x not in excluded]
