"""
Contains the error containers of the validation framework. The error values themselves are opaque: the framework
never creates error content on its own, it only collects and merges what the validators were given.
"""
from typing import Any, Iterable, Iterator, Optional, overload


class ValidationErrors:
    """
    An immutable, ordered list of error values produced by one or more failing validators.
    Concatenating two instances (`errors_1 + errors_2`) keeps the errors of the left operand in front.
    """

    __slots__ = ("_errors",)

    def __init__(self, *errors: Any):
        self._errors: tuple[Any, ...] = errors

    @classmethod
    def from_list(cls, errors: Iterable[Any]) -> "ValidationErrors":
        """Creates a new instance from any iterable of error values."""
        return cls(*errors)

    @property
    def errors(self) -> list[Any]:
        """A (new) list of all contained error values"""
        return list(self._errors)

    @property
    def first(self) -> Optional[Any]:
        """The first error or None if there is none"""
        return self._errors[0] if self._errors else None

    @property
    def last(self) -> Optional[Any]:
        """The last error or None if there is none"""
        return self._errors[-1] if self._errors else None

    @overload
    def __getitem__(self, index: int) -> Any:
        ...

    @overload
    def __getitem__(self, index: slice) -> "ValidationErrors":
        ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ValidationErrors(*self._errors[index])
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._errors)

    def __add__(self, other):
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return ValidationErrors(*self._errors, *other._errors)

    def __eq__(self, other):
        return isinstance(other, ValidationErrors) and self._errors == other._errors

    def __ne__(self, other):
        return not isinstance(other, ValidationErrors) or self._errors != other._errors

    def __hash__(self):
        return hash(self._errors)

    def __str__(self):
        return f"ValidationErrors({', '.join(str(error) for error in self._errors)})"

    def __repr__(self):
        return f"ValidationErrors({', '.join(repr(error) for error in self._errors)})"


class ValidationFailure(Exception):
    """
    Raised by `Outcome.get()` if you ask a failed outcome for its value. Validators themselves never raise this
    error - a failing validation is returned as `Failure`.
    """

    def __init__(self, errors: ValidationErrors):
        super().__init__(f"Validation failed with {len(errors)} error(s): {errors}")
        self.errors = errors


class EmptyCompositionError(ValueError):
    """
    Raised if a sequential or parallel composition is built from an empty list of validators.
    """
