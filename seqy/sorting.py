"""
sort/dedup engine.

produces canonical sorted (and optionally duplicate-free) copies of a sequence.
inputs are never mutated; absent input (None) stays absent.
"""
import logging
import math
import numpy as np
from .types import *

logger = logging.getLogger(__name__)

# minimum length at which uniq() hands homogeneous numeric data to numpy
NUMPY_THRESHOLD = 256


def sort(seq: MaybeIterable[T]) -> MaybeList[T]:
    """return a new list sorted ascending. the input is not modified."""
    if seq is None:
        return None
    return sorted(seq)


def sort_by(seq: MaybeIterable[T], key: KeySelector[T, K], reverse: bool = False) -> MaybeList[T]:
    """return a new list sorted by key"""
    if seq is None:
        return None
    return sorted(seq, key=key, reverse=reverse)


def sorted_uniq(seq: MaybeIterable[T]) -> MaybeList[T]:
    """
    remove duplicates from an already sorted sequence in a single pass.
    the input must be non-decreasing; unsorted input gives wrong results, not an error.
    """
    if seq is None:
        return None
    result = []
    for item in seq:
        # compare against the last emitted element, never a placeholder
        if result and result[-1] == item:
            continue
        result.append(item)
    return result


def _try_numpy_uniq(data: List[T]) -> MaybeList[T]:
    """sorted unique values via numpy for large homogeneous int/float data, else None"""
    if len(data) < NUMPY_THRESHOLD:
        return None

    first_type = type(data[0])
    # bool is an int subclass but sorts and prints differently once it goes through numpy
    if first_type not in (int, float) or any(type(x) is not first_type for x in data):
        return None
    if first_type is float and any(math.isnan(x) for x in data):
        logger.debug("uniq: nan present, skipping numpy path")
        return None

    try:
        arr = np.array(data)
        # ints past the int64 range come back as float64 or object; those must not round-trip
        if arr.dtype.kind not in ('iu' if first_type is int else 'f'):
            logger.debug("uniq: numpy chose dtype %s for %s values, skipping", arr.dtype, first_type.__name__)
            return None
        logger.debug("uniq: numpy path for %d %s values", len(data), first_type.__name__)
        return np.unique(arr).tolist()
    except (TypeError, ValueError, OverflowError):
        return None


def uniq(seq: MaybeIterable[T]) -> MaybeList[T]:
    """
    return a new sorted list with duplicates removed.
    always re-sorts first, so the caller's ordering does not matter.
    """
    if seq is None:
        return None
    data = list(seq)
    optimized = _try_numpy_uniq(data) if data else None
    if optimized is not None:
        return optimized
    return sorted_uniq(sort(data))


distinct = uniq
