import typing
from .types import *
from .mapping import get_keys, get_values

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: MaybeIterable[T]) -> 'Sequence[T]':
    """create sequence from iterable; None gives an absent sequence"""
    from .sequence import Sequence
    if data is None:
        return Sequence(lambda: None)
    return Sequence(lambda: list(data))

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence(lambda: [])

def absent() -> 'Sequence[Any]':
    """create absent sequence, distinct from an empty one"""
    from .sequence import Sequence
    return Sequence(lambda: None)

def from_keys(mapping: Mapping[K, Any], element_type: Optional[type] = str) -> 'Sequence[K]':
    """create sequence from the keys of a mapping (unspecified order)"""
    from .sequence import Sequence
    keys = get_keys(mapping, element_type)
    return Sequence(lambda: keys)

def from_values(mapping: Mapping[Any, V], element_type: Optional[type] = str) -> 'Sequence[V]':
    """create sequence from the values of a mapping (unspecified order)"""
    from .sequence import Sequence
    values = get_values(mapping, element_type)
    return Sequence(lambda: values)

# --- aliases ---
new = from_iterable
S = from_iterable
