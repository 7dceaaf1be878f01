"""
Contains the `Verify` namespace, the entry point to create validators. All methods are static; the type parameter
only documents the subject type, e.g. `Verify[LoginForm].at_once(...)`.
"""
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional

from . import builders
from .outcome import fail
from .types import FieldT, OutputT, Predicate, SubjectT, keep_first
from .validator import Validator, compose_all, compose_sequential, that

if TYPE_CHECKING:
    from .types import ProjectionLike


class Verify(Generic[SubjectT]):
    """
    Factories for validators on subjects of type `SubjectT`.
    """

    @staticmethod
    def that(predicate: Predicate[SubjectT], otherwise: Any) -> Validator[SubjectT, SubjectT]:
        """
        Returns the unchanged subject if `predicate(subject)` is true, otherwise fails with the single error
        `otherwise`.
        """
        return that(predicate, otherwise)

    @staticmethod
    def property(predicate: Predicate[SubjectT], otherwise: Any) -> Validator[SubjectT, SubjectT]:
        """Same as `Verify.that`"""
        return that(predicate, otherwise)

    @staticmethod
    def valid(value: OutputT) -> Validator[Any, OutputT]:
        """Ignores the subject and always succeeds with `value`"""
        return Validator.lift(lambda _: value)

    @staticmethod
    def error(error: Any) -> Validator[Any, Any]:
        """Ignores the subject and always fails with the single error `error`"""
        return Validator(lambda _: fail(error))

    @staticmethod
    def at(
        projection: "ProjectionLike[SubjectT, FieldT]", validator: Validator[FieldT, Any]
    ) -> Validator[SubjectT, SubjectT]:
        """
        Validates the field `projection` selects with `validator`. On success the subject itself is returned.
        `projection` is a function or a dotted attribute path.
        """
        return Validator.lift(lambda subject: subject).then_on(projection, validator)

    @staticmethod
    def optional(validator: Validator[SubjectT, OutputT]) -> Validator[Optional[SubjectT], Optional[OutputT]]:
        """
        Lifts `validator` to optional subjects: `None` always succeeds with `None`, any other subject is validated by
        `validator`.
        """
        return validator.optional()

    @staticmethod
    def in_order(*validators: Validator[SubjectT, SubjectT]) -> Validator[SubjectT, SubjectT]:
        """
        Composes the validators sequentially: the resulting validator fails with the errors of the first failing
        validator and never runs the ones after it.
        Raises an EmptyCompositionError if no validator is given.
        """
        return compose_sequential(validators)

    @staticmethod
    def at_once(
        *validators: Validator[SubjectT, SubjectT],
        merge: Callable[[SubjectT, SubjectT], SubjectT] = keep_first,
    ) -> Validator[SubjectT, SubjectT]:
        """
        Composes the validators in parallel: all validators run and the errors of all failing ones are returned in
        the given order. If all succeed, their outputs are reduced with `merge` (the first output by default).
        Raises an EmptyCompositionError if no validator is given.
        """
        return compose_all(validators, merge)

    @staticmethod
    def all(
        *validators: Validator[SubjectT, SubjectT], merge: Callable[[SubjectT, SubjectT], SubjectT]
    ) -> Validator[SubjectT, SubjectT]:
        """Same as `Verify.at_once` but the merge function has to be given explicitly"""
        return compose_all(validators, merge)

    in_sequence = staticmethod(builders.sequenced)
    parallel = staticmethod(builders.parallel)
