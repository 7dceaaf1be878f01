"""
Contains the types used in the validation framework
"""
from typing import TYPE_CHECKING, Any, Callable, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .keypath import KeyPath
    from .outcome import Outcome

SubjectT = TypeVar("SubjectT")
OutputT = TypeVar("OutputT")
ResultT = TypeVar("ResultT")
FieldT = TypeVar("FieldT")
ErrorT = TypeVar("ErrorT")

Predicate: TypeAlias = Callable[[SubjectT], bool]
Projection: TypeAlias = Callable[[SubjectT], FieldT]
ProjectionLike: TypeAlias = "Projection[SubjectT, FieldT] | KeyPath[SubjectT, FieldT] | str"
ValidatorFunction: TypeAlias = "Callable[[SubjectT], Outcome[OutputT]]"


def keep_first(first: OutputT, _: Any) -> OutputT:
    """
    The default merge function of parallel compositions. It keeps the output of the left validator.
    """
    return first
