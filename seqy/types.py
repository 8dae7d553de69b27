from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Mapping, Sequence as SequenceType
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
IndexedSelector = Callable[[int, T], U]
Accumulator = Callable[[U, int, T], U]

# either (index, element) -> result or (element) -> result
Callback = Union[Callable[[int, T], U], Callable[[T], U]]
Visitor = Callable[[T], Any]

# absent (None) and empty ([]) are different values everywhere in seqy
MaybeList = Optional[List[T]]
MaybeIterable = Optional[Iterable[T]]

NOT_FOUND = -1


class SeqyError(Exception):
    """base class for every error raised by seqy itself"""
    pass


class CallbackShapeError(SeqyError, TypeError):
    """a callback was not callable as (index, element) or (element)"""

    def __init__(self, operation: str, func: Any, detail: str = ""):
        self.operation = operation
        self.func = func
        message = f"{operation} cannot understand callback {func!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ElementTypeError(SeqyError, TypeError):
    """a container or element could not be coerced to the expected type"""
    pass
