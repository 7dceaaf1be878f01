"""
Contains the two-case outcome of a validation: either `Success` holding the (possibly transformed) subject or
`Failure` holding the `ValidationErrors`.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import ValidationErrors, ValidationFailure

ValueT = TypeVar("ValueT")
MappedT = TypeVar("MappedT")


class Outcome(ABC, Generic[ValueT]):
    """
    Base class of `Success` and `Failure`. Use `isinstance` or the `is_success`/`is_failure` properties to tell
    them apart.
    """

    @property
    @abstractmethod
    def is_success(self) -> bool:
        """True if this is a `Success`"""

    @property
    def is_failure(self) -> bool:
        """True if this is a `Failure`"""
        return not self.is_success

    @abstractmethod
    def map(self, transform: Callable[[ValueT], MappedT]) -> "Outcome[MappedT]":
        """Applies `transform` to the value of a `Success`. A `Failure` is passed through unchanged."""

    @abstractmethod
    def flat_map(self, next_: Callable[[ValueT], "Outcome[MappedT]"]) -> "Outcome[MappedT]":
        """
        Feeds the value of a `Success` into `next_` and returns its outcome. A `Failure` is passed through unchanged
        and `next_` is not called.
        """

    @abstractmethod
    def with_default(self, value: ValueT) -> ValueT:
        """Returns the value of a `Success` or `value` if this is a `Failure`."""

    @abstractmethod
    def get(self) -> ValueT:
        """Returns the value of a `Success`. Raises `ValidationFailure` if this is a `Failure`."""

    @abstractmethod
    def get_failure(self) -> Optional[ValidationErrors]:
        """Returns the errors of a `Failure` or None."""

    @property
    def error_count(self) -> int:
        """Number of errors; always 0 for a `Success`"""
        failure = self.get_failure()
        return 0 if failure is None else len(failure)

    @property
    def failures(self) -> list[Any]:
        """List of all errors; always empty for a `Success`"""
        failure = self.get_failure()
        return [] if failure is None else failure.errors


@dataclass(frozen=True)
class Success(Outcome[ValueT]):
    """A successful validation"""

    value: ValueT

    @property
    def is_success(self) -> bool:
        return True

    def map(self, transform: Callable[[ValueT], MappedT]) -> Outcome[MappedT]:
        return Success(transform(self.value))

    def flat_map(self, next_: Callable[[ValueT], Outcome[MappedT]]) -> Outcome[MappedT]:
        return next_(self.value)

    def with_default(self, value: ValueT) -> ValueT:
        return self.value

    def get(self) -> ValueT:
        return self.value

    def get_failure(self) -> Optional[ValidationErrors]:
        return None


@dataclass(frozen=True)
class Failure(Outcome[Any]):
    """A failed validation"""

    errors: ValidationErrors

    @property
    def is_success(self) -> bool:
        return False

    def map(self, transform: Callable[[Any], MappedT]) -> Outcome[MappedT]:
        return self

    def flat_map(self, next_: Callable[[Any], Outcome[MappedT]]) -> Outcome[MappedT]:
        return self

    def with_default(self, value: ValueT) -> ValueT:
        return value

    def get(self) -> Any:
        raise ValidationFailure(self.errors)

    def get_failure(self) -> Optional[ValidationErrors]:
        return self.errors


def fail(*errors: Any) -> Failure:
    """Shorthand for `Failure(ValidationErrors(*errors))`"""
    return Failure(ValidationErrors(*errors))
