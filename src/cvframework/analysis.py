"""
Contains functionality to analyze the errors of a failed validation
"""
from typing import Any, Callable, Hashable, Iterable, TypeVar

from frozendict import frozendict
from typeguard import TypeCheckError, check_type

from .types import ErrorT

FieldKeyT = TypeVar("FieldKeyT", bound=Hashable)


def _matches(error: Any, error_type: Any) -> bool:
    try:
        check_type(error, error_type)
    except TypeCheckError:
        return False
    return True


def filter_errors(errors: Iterable[Any], error_type: Any = Any) -> list[ErrorT]:
    """
    Returns all errors matching `error_type` in their original order. Errors of a different type are dropped
    silently. `error_type` may be anything `typeguard.check_type` understands, e.g. a union of error classes.
    """
    if error_type is Any:
        return list(errors)
    return [error for error in errors if _matches(error, error_type)]


def group_errors(
    errors: Iterable[Any],
    by: Callable[[ErrorT], FieldKeyT],
    error_type: Any = Any,
) -> frozendict[FieldKeyT, list[ErrorT]]:
    """
    Groups the errors matching `error_type` by the key `by` selects. The keys are ordered by their first occurrence
    and each group keeps the relative order of the errors.
    """
    groups: dict[FieldKeyT, list[ErrorT]] = {}
    for error in filter_errors(errors, error_type):
        groups.setdefault(by(error), []).append(error)
    return frozendict(groups)
