from enum import Enum
from typing import Any

import pytest

from cvframework import Success, ValidationErrors, Validator, Verify
from cvframework.outcome import fail


class MyError(Enum):
    ERROR_1 = 1
    ERROR_2 = 2
    ERROR_3 = 3


def counting(validator: Validator, calls: list[Any]) -> Validator:
    """Wraps a validator and records every subject it is called with."""

    def _counting(subject):
        calls.append(subject)
        return validator(subject)

    return Validator(_counting)


class TestValidatorCore:
    def test_construct_and_invoke(self):
        validator = Validator(lambda subject: Success(subject * 2))
        assert validator(3) == Success(6)
        assert validator.verify(3) == Success(6)

    def test_construct_requires_callable(self):
        with pytest.raises(TypeError):
            Validator("not a function")  # type:ignore[arg-type]

    @pytest.mark.parametrize("subject", [0, 1, -5, 100])
    def test_invocation_is_repeatable(self, subject):
        validator = Verify.at_once(
            Verify.that(lambda number: number > 0, otherwise=MyError.ERROR_1),
            Verify.that(lambda number: number % 2 == 0, otherwise=MyError.ERROR_2),
        )
        assert validator(subject) == validator(subject)

    def test_lift_always_succeeds(self):
        validator = Validator.lift(len)
        assert validator("123") == Success(3)
        assert validator("") == Success(0)

    def test_map_transforms_output(self):
        string_validator = Verify.valid("123")
        int_validator = string_validator.map(int)
        assert int_validator("").with_default(0) == 123

    def test_map_is_not_applied_on_failure(self):
        calls: list[Any] = []
        validator = Verify.error(MyError.ERROR_1).map(calls.append)
        assert validator(3).failures == [MyError.ERROR_1]
        assert not calls


class TestAndThen:
    def test_and_then_does_not_accumulate_errors(self):
        validator = Verify.error(MyError.ERROR_1).and_then(Verify.error(MyError.ERROR_2))
        result = validator(3)
        assert result.error_count == 1
        assert result.failures == [MyError.ERROR_1]

    def test_and_then_does_not_run_next_if_caller_fails(self):
        calls: list[Any] = []
        validator = Verify.error(MyError.ERROR_1).and_then(counting(Verify.valid(3), calls))
        result = validator(3)
        assert result.get_failure() == ValidationErrors(MyError.ERROR_1)
        assert not calls

    def test_and_then_returns_result_of_next(self):
        validator = Verify.valid(3).and_then(Verify.error(MyError.ERROR_2))
        assert validator(1).failures == [MyError.ERROR_2]

    def test_and_then_can_transform_subject(self):
        length = Validator.lift(len)
        double = Validator(lambda value: Success(value * 2))
        validator = length.and_then(double)
        assert validator("123").get() == 6

    def test_and_then_feeds_output_into_next(self):
        calls: list[Any] = []
        validator = Validator.lift(str.upper).and_then(counting(Verify.that(str.isupper, "lower"), calls))
        assert validator("abc") == Success("ABC")
        assert calls == ["ABC"]

    def test_and_then_requires_validator(self):
        with pytest.raises(TypeError):
            Verify.valid(1).and_then(lambda value: value)  # type:ignore[arg-type]


class TestAdd:
    def test_add_accumulates_errors_in_order(self):
        validator = Verify.error(MyError.ERROR_1).add(Verify.error(MyError.ERROR_2), merge=lambda fst, _: fst)
        result = validator(3)
        assert result.error_count == 2
        assert result.get_failure().first == MyError.ERROR_1
        assert result.get_failure().last == MyError.ERROR_2

    @pytest.mark.parametrize(
        "left, right, expected_errors",
        [
            pytest.param(Verify.valid(1), Verify.error(MyError.ERROR_2), [MyError.ERROR_2], id="right fails"),
            pytest.param(Verify.error(MyError.ERROR_1), Verify.valid(1), [MyError.ERROR_1], id="left fails"),
        ],
    )
    def test_add_single_failure(self, left, right, expected_errors):
        assert left.add(right)(0).failures == expected_errors

    def test_add_merges_outputs(self):
        validator = Verify.valid(2).add(Verify.valid("b"), merge=lambda number, text: text * number)
        assert validator(None) == Success("bb")

    def test_add_keeps_first_output_by_default(self):
        validator = Verify.valid("left").add(Verify.valid("right"))
        assert validator(None) == Success("left")

    def test_both_branches_get_the_same_subject(self):
        left_calls: list[Any] = []
        right_calls: list[Any] = []
        validator = counting(Validator.lift(lambda value: value + 1), left_calls).add(
            counting(Validator.lift(lambda value: value + 2), right_calls), merge=lambda fst, snd: (fst, snd)
        )
        assert validator(10) == Success((11, 12))
        assert left_calls == [10]
        assert right_calls == [10]

    def test_add_check_accumulates(self):
        validator = Verify.error(MyError.ERROR_1).add_check(lambda value: value > 10, otherwise=MyError.ERROR_2)
        assert validator(2).failures == [MyError.ERROR_1, MyError.ERROR_2]
        assert validator(20).failures == [MyError.ERROR_1]

    def test_add_check_keeps_output(self):
        validator = Validator.lift(lambda value: value * 100).add_check(lambda value: value > 1, MyError.ERROR_1)
        assert validator(2) == Success(200)


class TestThenCheck:
    def test_then_check_short_circuits(self):
        calls: list[Any] = []

        def predicate(value):
            calls.append(value)
            return False

        validator = Verify.error(MyError.ERROR_1).then_check(predicate, otherwise=MyError.ERROR_2)
        assert validator(1).failures == [MyError.ERROR_1]
        assert not calls

    def test_then_check_tests_original_subject(self):
        validator = Validator.lift(len).then_check(lambda text: text.startswith("a"), otherwise=MyError.ERROR_2)
        assert validator("abc") == Success(3)
        assert validator("bcd").failures == [MyError.ERROR_2]


class TestThenOn:
    def test_then_on_returns_parent_on_success(self):
        validator = Validator.lift(lambda subject: subject).then_on(
            lambda pair: pair[0], Verify.that(lambda number: number > 0, MyError.ERROR_1)
        )
        assert validator((1, "x")) == Success((1, "x"))

    def test_then_on_propagates_field_errors(self):
        field_validator = Verify.at_once(Verify.error(MyError.ERROR_1), Verify.error(MyError.ERROR_2))
        validator = Validator.lift(lambda subject: subject).then_on(lambda pair: pair[1], field_validator)
        assert validator((1, "x")).failures == [MyError.ERROR_1, MyError.ERROR_2]

    def test_then_on_returns_original_subject_not_caller_output(self):
        validator = Validator.lift(str.strip).then_on(len, Verify.that(lambda length: length > 0, MyError.ERROR_1))
        assert validator("  ab  ") == Success("  ab  ")

    def test_then_on_reports_only_field_errors(self):
        calls: list[Any] = []
        caller = counting(Verify.error(MyError.ERROR_3), calls)
        validator = caller.then_on(len, Verify.that(lambda length: length > 5, MyError.ERROR_2))
        assert validator("abc").failures == [MyError.ERROR_2]
        assert validator("abcdefg") == Success("abcdefg")
        assert not calls


class TestIgnore:
    def test_ignore_bypasses_validator(self):
        calls: list[Any] = []
        validator = counting(Verify.error(MyError.ERROR_1), calls).ignore(when=lambda value: value == 0)
        assert validator(0) == Success(0)
        assert not calls

    def test_ignore_runs_validator_otherwise(self):
        validator = Verify.error(MyError.ERROR_1).ignore(when=lambda value: value == 0)
        assert validator(1).failures == [MyError.ERROR_1]


class TestOptional:
    def test_none_always_succeeds(self):
        validator = Verify.error(MyError.ERROR_1).optional()
        assert validator(None) == Success(None)

    def test_present_value_is_delegated(self):
        validator = Validator.lift(lambda value: value + 1).optional()
        assert validator(1) == Success(2)
        assert Verify.error(MyError.ERROR_1).optional()(1).failures == [MyError.ERROR_1]


class TestErrorExtraction:
    def test_errors_empty_on_success(self):
        assert Verify.valid(1).errors(0) == []

    def test_errors_on_failure(self):
        validator = Verify.at_once(Verify.error(MyError.ERROR_1), Verify.error("plain string"))
        assert validator.errors(0) == [MyError.ERROR_1, "plain string"]

    def test_typed_errors_drop_other_types(self):
        validator = Verify.at_once(
            Verify.error(MyError.ERROR_1), Verify.error("plain string"), Verify.error(MyError.ERROR_3)
        )
        assert validator.errors(0, error_type=MyError) == [MyError.ERROR_1, MyError.ERROR_3]
        assert validator.errors(0, error_type=str) == ["plain string"]
        assert validator.errors(0, error_type=int) == []

    def test_typed_errors_with_union(self):
        validator = Verify.at_once(Verify.error(MyError.ERROR_1), Verify.error("text"), Verify.error(1.5))
        assert validator.errors(0, error_type=MyError | str) == [MyError.ERROR_1, "text"]

    def test_grouped_errors_empty(self):
        assert Verify.valid(1).grouped_errors(0, by=lambda error: error) == {}
        assert Verify.error("text").grouped_errors(0, by=lambda error: error.value, error_type=MyError) == {}
