"""
Contains ready-made validators for strings and integers. They are plain `Verify.that` validators with a fixed
predicate. Character sets can be given as string (`string.digits`) or any iterable of characters.
"""
import re
from typing import Any, Iterable

from .validator import Validator, that


def min_length(value: int, otherwise: Any) -> Validator[str, str]:
    """Fails with `otherwise` if the string has less than `value` characters."""
    return that(lambda text: len(text) >= value, otherwise)


def max_length(value: int, otherwise: Any) -> Validator[str, str]:
    """Fails with `otherwise` if the string has more than `value` characters."""
    return that(lambda text: len(text) <= value, otherwise)


def disallowed_characters(characters: Iterable[str], otherwise: Any) -> Validator[str, str]:
    """Fails with `otherwise` if the string contains any of `characters`."""
    forbidden = frozenset(characters)
    return that(lambda text: forbidden.isdisjoint(text), otherwise)


def from_characters(characters: Iterable[str], otherwise: Any) -> Validator[str, str]:
    """Fails with `otherwise` if the string contains a character which is not in `characters`."""
    allowed = frozenset(characters)
    return that(lambda text: allowed.issuperset(text), otherwise)


def contains_some_of(characters: Iterable[str], otherwise: Any) -> Validator[str, str]:
    """Fails with `otherwise` if the string contains none of `characters`."""
    wanted = frozenset(characters)
    return that(lambda text: not wanted.isdisjoint(text), otherwise)


def matches_regex(pattern: str | re.Pattern[str], otherwise: Any) -> Validator[str, str]:
    """Fails with `otherwise` if `pattern` doesn't match the complete string."""
    regex = re.compile(pattern)
    return that(lambda text: regex.fullmatch(text) is not None, otherwise)


def greater_than_zero(otherwise: Any) -> Validator[int, int]:
    """Fails with `otherwise` if the number is not positive."""
    return that(lambda number: number > 0, otherwise)
