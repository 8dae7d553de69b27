from collections.abc import Iterable as IterableABC, Mapping as MappingABC
from .types import *


def _check(item: Any, element_type: Optional[type], what: str, position: Any) -> Any:
    if element_type is None:
        return item
    if not isinstance(item, element_type):
        raise ElementTypeError(
            f"{what} {position!r} is a {type(item).__name__}, expected {element_type.__name__}"
        )
    # normalise subclasses (e.g. a str subclass) to the plain type
    return item if type(item) is element_type else element_type(item)


def get_keys(mapping: Mapping[K, V], element_type: Optional[type] = str) -> List[K]:
    """keys of a mapping as a list, in unspecified order"""
    if not isinstance(mapping, MappingABC):
        raise ElementTypeError(f"get_keys expected a mapping, got {type(mapping).__name__}")
    return [_check(key, element_type, "key", key) for key in mapping.keys()]


def get_values(mapping: Mapping[K, V], element_type: Optional[type] = str) -> List[V]:
    """values of a mapping as a list, in unspecified order"""
    if not isinstance(mapping, MappingABC):
        raise ElementTypeError(f"get_values expected a mapping, got {type(mapping).__name__}")
    return [_check(value, element_type, "value for key", key) for key, value in mapping.items()]


def to_list_of(values: Iterable[Any], element_type: Optional[type] = str) -> List[Any]:
    """
    coerce a list-like of element_type-like values (subclasses included) into
    a plain list. strings, bytes and mappings are rejected as containers.
    """
    if isinstance(values, (str, bytes, MappingABC)) or not isinstance(values, IterableABC):
        raise ElementTypeError(f"to_list_of cannot convert {type(values).__name__} to a list")
    return [_check(item, element_type, "element", i) for i, item in enumerate(values)]
