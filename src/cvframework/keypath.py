"""
Contains the KeyPath which projects a subject onto one of its fields. It can be created from a plain function or,
for the "every day" usage, from a dotted attribute path.
"""
from typing import Any, Callable, Generic, Optional

from .types import FieldT, SubjectT
from .utils.query_object import required_field


class KeyPath(Generic[SubjectT, FieldT]):
    """
    A pure accessor from a parent subject to one of its fields.
    If created from a string, the path is resolved by `required_field` and, if `field_type` is given, the type of the
    resolved value is checked.
    """

    __slots__ = ("_projection", "attribute_path", "field_type")

    def __init__(self, projection: Callable[[SubjectT], FieldT] | str, field_type: Any = Any):
        self.attribute_path: Optional[str] = None
        self.field_type: Any = field_type
        if isinstance(projection, str):
            if not projection:
                raise ValueError("The attribute path must not be empty")
            self.attribute_path = projection
            self._projection: Callable[[SubjectT], FieldT] = self._query
        elif callable(projection):
            self._projection = projection
        else:
            raise TypeError(f"Expected a callable or an attribute path, got {type(projection).__name__}")

    @classmethod
    def of(cls, projection: "Callable[[SubjectT], FieldT] | str | KeyPath[SubjectT, FieldT]") -> "KeyPath":
        """Returns `projection` if it already is a KeyPath and wraps it otherwise."""
        if isinstance(projection, KeyPath):
            return projection
        return cls(projection)

    def _query(self, subject: SubjectT) -> FieldT:
        assert self.attribute_path is not None
        return required_field(subject, self.attribute_path, self.field_type)

    def __call__(self, subject: SubjectT) -> FieldT:
        return self._projection(subject)

    def __eq__(self, other):
        return (
            isinstance(other, KeyPath)
            and self.attribute_path == other.attribute_path
            and self.field_type == other.field_type
            and (self.attribute_path is not None or self._projection == other._projection)
        )

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        if self.attribute_path is not None:
            return hash((self.attribute_path, self.field_type))
        return hash((self._projection, self.field_type))

    def __str__(self):
        if self.attribute_path is not None:
            return f"KeyPath(.{self.attribute_path})"
        return f"KeyPath({getattr(self._projection, '__name__', repr(self._projection))})"
