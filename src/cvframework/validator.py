"""
Contains the Validator class, the composition engine of the framework. A Validator wraps a pure function which
takes a subject and returns an `Outcome`. Validators are immutable; every composition method returns a new Validator
which shares the validators it is built from.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, Hashable, Optional, Sequence, TypeVar

from frozendict import frozendict

from .analysis import filter_errors, group_errors
from .errors import EmptyCompositionError, ValidationErrors
from .keypath import KeyPath
from .outcome import Failure, Outcome, Success, fail
from .types import ErrorT, FieldT, OutputT, Predicate, ResultT, SubjectT, ValidatorFunction, keep_first

if TYPE_CHECKING:
    from .types import ProjectionLike

logger = logging.getLogger(__name__)

OtherT = TypeVar("OtherT")
FieldKeyT = TypeVar("FieldKeyT", bound=Hashable)


class Validator(Generic[SubjectT, OutputT]):
    """
    A validation which takes a subject of type `SubjectT` and either succeeds with a value of type `OutputT` or
    fails with one or more errors. A `Validator[S, S]` is the common case: a check which returns the subject
    unchanged on success.
    """

    __slots__ = ("_function",)

    def __init__(self, function: "ValidatorFunction[SubjectT, OutputT]"):
        if not callable(function):
            raise TypeError(f"Expected a callable, got {type(function).__name__}")
        self._function = function

    def __call__(self, subject: SubjectT) -> Outcome[OutputT]:
        return self._function(subject)

    def verify(self, subject: SubjectT) -> Outcome[OutputT]:
        """Runs the validation on `subject`. Equivalent to calling the validator."""
        return self._function(subject)

    def __repr__(self):
        return f"Validator({getattr(self._function, '__qualname__', repr(self._function))})"

    @classmethod
    def lift(cls, function: Callable[[SubjectT], OutputT]) -> "Validator[SubjectT, OutputT]":
        """
        Lifts a pure function into a validator which always succeeds with `function(subject)`.
        """
        return cls(lambda subject: Success(function(subject)))

    # Composition

    def map(self, transform: Callable[[OutputT], ResultT]) -> "Validator[SubjectT, ResultT]":
        """
        Transforms the output of this validator. `transform` is only applied if the validation succeeds; errors are
        passed through unchanged.
        """
        return Validator(lambda subject: self._function(subject).map(transform))

    def and_then(self, next_: "Validator[OutputT, ResultT]") -> "Validator[SubjectT, ResultT]":
        """
        Sequential composition. `next_` validates the output of this validator and only runs if this validator
        succeeds. Hence, at most one validator of an `and_then` chain contributes errors.
        """
        _check_validator(next_)
        return Validator(lambda subject: self._function(subject).flat_map(next_.verify))

    def add(
        self,
        other: "Validator[SubjectT, OtherT]",
        merge: Callable[[OutputT, OtherT], ResultT] = keep_first,  # type:ignore[assignment]
    ) -> "Validator[SubjectT, ResultT]":
        """
        Parallel composition. Both validators get the same subject. If both succeed, the outputs are combined with
        `merge` (by default the output of this validator is kept). If any fails, the errors of all failing
        validators are returned; the errors of this validator come first.
        """
        _check_validator(other)

        def _parallel(subject: SubjectT) -> Outcome[ResultT]:
            result_1 = self._function(subject)
            result_2 = other.verify(subject)
            match (result_1, result_2):
                case (Success(value=output_1), Success(value=output_2)):
                    return Success(merge(output_1, output_2))
                case (Failure(errors=errors_1), Failure(errors=errors_2)):
                    return Failure(errors_1 + errors_2)
                case (Success(), Failure()):
                    return result_2
                case _:
                    return result_1

        return Validator(_parallel)

    def then_on(
        self: "Validator[SubjectT, SubjectT]",
        projection: "ProjectionLike[SubjectT, FieldT]",
        check: "Validator[FieldT, Any]",
    ) -> "Validator[SubjectT, SubjectT]":
        """
        Runs `check` on a field of the subject. The field is selected by `projection`, either a function or a dotted
        attribute path like `"email_field.text"`. On success the original subject is returned - the field validation
        never changes the parent. On failure the errors of `check` are returned.
        Note that this validator itself is not run; combine it with `add` or `and_then` for that.
        """
        _check_validator(check)
        key_path = KeyPath.of(projection)

        def _focus(subject: SubjectT) -> Outcome[SubjectT]:
            return check.verify(key_path(subject)).map(lambda _: subject)

        return Validator(_focus)

    def ignore(self: "Validator[SubjectT, SubjectT]", when: Predicate[SubjectT]) -> "Validator[SubjectT, SubjectT]":
        """
        Skips this validator if `when(subject)` holds: the subject is returned unchanged and the validator does not
        run. Only meaningful for validators returning their subject's type.
        """

        def _bypass(subject: SubjectT) -> Outcome[SubjectT]:
            if when(subject):
                return Success(subject)
            return self._function(subject)

        return Validator(_bypass)

    def optional(self) -> "Validator[Optional[SubjectT], Optional[OutputT]]":
        """
        Converts this validator into one which accepts `None`. `None` is always valid; any other value is validated
        by this validator.
        """

        def _optional(subject: Optional[SubjectT]) -> Outcome[Optional[OutputT]]:
            if subject is None:
                return Success(None)
            return self._function(subject)

        return Validator(_optional)

    def add_check(self, predicate: Predicate[SubjectT], otherwise: Any) -> "Validator[SubjectT, OutputT]":
        """
        Adds a parallel predicate check. If the predicate doesn't hold, `otherwise` is appended to the errors of this
        validator.
        """
        return self.add(that(predicate, otherwise), keep_first)

    def then_check(self, predicate: Predicate[SubjectT], otherwise: Any) -> "Validator[SubjectT, OutputT]":
        """
        Adds a sequential predicate check. The predicate is tested against the original subject and only if this
        validator succeeded. The output of this validator is kept.
        """

        def _then_check(subject: SubjectT) -> Outcome[OutputT]:
            return self._function(subject).flat_map(
                lambda output: Success(output) if predicate(subject) else fail(otherwise)
            )

        return Validator(_then_check)

    # Utilities

    def errors(self, subject: SubjectT, error_type: Any = Any) -> list[ErrorT]:
        """
        Returns the errors of the validation of `subject`; empty if it succeeds. If `error_type` is given, only
        errors of this type are returned.
        """
        return filter_errors(self._function(subject).failures, error_type)

    def grouped_errors(
        self,
        subject: SubjectT,
        by: Callable[[ErrorT], FieldKeyT],
        error_type: Any = Any,
    ) -> frozendict[FieldKeyT, list[ErrorT]]:
        """
        Groups the errors of the validation of `subject` by the key `by` selects from each error, e.g. the form field
        it belongs to. Errors not matching `error_type` are dropped.
        """
        return group_errors(self._function(subject).failures, by, error_type)


def _check_validator(candidate: Any) -> None:
    if not isinstance(candidate, Validator):
        raise TypeError(f"Expected a Validator, got {type(candidate).__name__}")


def that(predicate: Predicate[SubjectT], otherwise: Any) -> Validator[SubjectT, SubjectT]:
    """
    Creates a validator which returns the unchanged subject if `predicate` holds and fails with exactly the error
    `otherwise` if not.
    """

    def _that(subject: SubjectT) -> Outcome[SubjectT]:
        return Success(subject) if predicate(subject) else fail(otherwise)

    return Validator(_that)


def _non_empty(validators: Sequence[Validator], composition: str) -> None:
    if len(validators) == 0:
        raise EmptyCompositionError(f"A {composition} composition needs at least one validator")
    for validator in validators:
        _check_validator(validator)


def compose_sequential(validators: Sequence[Validator[SubjectT, SubjectT]]) -> Validator[SubjectT, SubjectT]:
    """
    Runs the validators one after another, each on the output of the previous one, like a chain of `and_then`.
    Only the first failing validator contributes errors; the ones after it don't run.
    Raises an EmptyCompositionError if `validators` is empty.
    """
    _non_empty(validators, "sequential")
    logger.debug("Composing %d validators sequentially", len(validators))
    chain = tuple(validators)

    def _sequential(subject: SubjectT) -> Outcome[SubjectT]:
        outcome = chain[0].verify(subject)
        for validator in chain[1:]:
            if isinstance(outcome, Failure):
                break
            outcome = validator.verify(outcome.get())
        return outcome

    return Validator(_sequential)


def compose_all(
    validators: Sequence[Validator[SubjectT, SubjectT]],
    merge: Callable[[SubjectT, SubjectT], SubjectT] = keep_first,
) -> Validator[SubjectT, SubjectT]:
    """
    Runs all validators on the same subject, like a left fold with `add`. The errors of all failing validators are
    accumulated in the order of `validators`. If all succeed, the outputs are reduced with `merge` from left to right.
    Raises an EmptyCompositionError if `validators` is empty.
    """
    _non_empty(validators, "parallel")
    logger.debug("Composing %d validators in parallel", len(validators))
    branches = tuple(validators)

    def _parallel(subject: SubjectT) -> Outcome[SubjectT]:
        outcomes = [validator.verify(subject) for validator in branches]
        if any(isinstance(outcome, Failure) for outcome in outcomes):
            return Failure(ValidationErrors.from_list(error for outcome in outcomes for error in outcome.failures))
        merged = outcomes[0].get()
        for outcome in outcomes[1:]:
            merged = merge(merged, outcome.get())
        return Success(merged)

    return Validator(_parallel)
