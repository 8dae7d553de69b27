"""
callback shape dispatch.

every element-wise operation accepts either an (index, element) callback or a
plain (element) callback. resolve() inspects the callback once, up front, and
hands back a normalised function that always takes the index.
"""
import inspect
import logging
from .types import *

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _positional_arity(signature: inspect.Signature) -> Tuple[int, float]:
    """(required, maximum) positional parameter counts; maximum is inf with *args"""
    required = 0
    maximum = 0
    for param in signature.parameters.values():
        if param.kind in _POSITIONAL:
            maximum += 1
            if param.default is inspect.Parameter.empty:
                required += 1
        elif param.kind == inspect.Parameter.VAR_POSITIONAL:
            maximum = float('inf')
        elif param.kind == inspect.Parameter.KEYWORD_ONLY and param.default is inspect.Parameter.empty:
            raise ValueError(f"required keyword-only parameter '{param.name}'")
    return required, maximum


def takes_index(func: Callable, operation: str, leading: int = 0) -> bool:
    """
    decides whether func wants the element index.
    `leading` counts fixed arguments that come before the index (e.g. reduce's accumulator).
    raises CallbackShapeError for anything that fits neither shape.
    """
    if not callable(func):
        raise CallbackShapeError(operation, func, "not callable")

    # classes used as converters (str, int, float...) are always element-shaped
    if isinstance(func, type):
        return False

    try:
        signature = inspect.signature(func)
    except (ValueError, TypeError):
        # operator.itemgetter / attrgetter / methodcaller and some builtins expose no signature
        logger.debug("%s: no signature for %r, treating it as an element callback", operation, func)
        return False

    try:
        required, maximum = _positional_arity(signature)
    except ValueError as e:
        raise CallbackShapeError(operation, func, str(e)) from e

    if required == leading + 2:
        return True
    if required == leading + 1:
        return False
    if required <= leading:
        # a bare *args (print, for one) gets just the element
        if maximum == float('inf') or maximum == leading + 1:
            return False
        if maximum >= leading + 2:
            return True

    raise CallbackShapeError(
        operation, func,
        f"expected {leading + 2} or {leading + 1} positional parameters, got {required} required"
    )


def resolve(func: Callback[T, U], operation: str) -> IndexedSelector[T, U]:
    """normalise a one-argument or two-argument callback to f(index, element)"""
    if takes_index(func, operation):
        logger.debug("%s: using indexed callback %r", operation, func)
        return func
    logger.debug("%s: using element callback %r", operation, func)
    return lambda i, x: func(x)


def resolve_accumulator(func: Callable, operation: str) -> Accumulator[U, T]:
    """normalise f(acc, index, element) or f(acc, element) to f(acc, index, element)"""
    if takes_index(func, operation, leading=1):
        return func
    return lambda acc, i, x: func(acc, x)
