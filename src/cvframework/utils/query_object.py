"""
Contains the attribute path lookup used by key paths. A path like `"email_field.text"` is resolved segment by
segment; each segment is looked up as attribute or, for mappings, as key.
"""
from collections.abc import Mapping
from typing import Any, TypeVar, overload

from typeguard import TypeCheckError, check_type

AttrT = TypeVar("AttrT")


def _resolve_segment(obj: Any, segment: str) -> Any:
    if isinstance(obj, Mapping):
        try:
            return obj[segment]
        except KeyError as error:
            raise AttributeError(segment) from error
    return getattr(obj, segment)


@overload
def required_field(obj: Any, attribute_path: str, attribute_type: type[AttrT]) -> AttrT:
    ...


@overload
def required_field(obj: Any, attribute_path: str, attribute_type: Any) -> Any:
    ...


def required_field(obj: Any, attribute_path: str, attribute_type: Any) -> Any:
    """
    Tries to query the `obj` with the provided `attribute_path`. If it is not existent,
    an AttributeError will be raised.
    If the attribute is found, the type will be checked and a TypeCheckError will be raised if the type doesn't match
    the value.
    """
    current_obj: Any = obj
    splitted_path = attribute_path.split(".")
    for index, segment in enumerate(splitted_path):
        try:
            current_obj = _resolve_segment(current_obj, segment)
        except AttributeError as error:
            current_path = ".".join(splitted_path[0 : index + 1])
            raise AttributeError(f"{type(obj).__name__}.{current_path}: Not found") from error
    try:
        check_type(current_obj, attribute_type)
    except TypeCheckError as error:
        raise TypeCheckError(f"{type(obj).__name__}.{attribute_path}: {error}") from error
    return current_obj
