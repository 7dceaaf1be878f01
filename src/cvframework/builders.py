"""
Contains decorators to assemble validators from a block of validators instead of chaining combinators by hand:

```
@sequenced
def email_validator():
    yield Verify.that(lambda text: len(text) > 0, otherwise=EmailError.REQUIRED)
    yield Verify.that(lambda text: "@" in text, otherwise=EmailError.BAD_FORMAT)
```

`email_validator` is now a `Validator` equivalent to `Verify.in_order(...)` of the yielded validators.
"""
from typing import Callable, Iterable, Optional, overload

from .types import SubjectT, keep_first
from .validator import Validator, compose_all, compose_sequential

ValidatorBlock = Callable[[], Iterable[Validator[SubjectT, SubjectT]]]


def sequenced(block: ValidatorBlock) -> Validator:
    """
    Composes the validators returned (or yielded) by `block` sequentially, see `compose_sequential`.
    """
    return compose_sequential(list(block()))


@overload
def parallel(block: ValidatorBlock, *, merge: Callable = keep_first) -> Validator:
    ...


@overload
def parallel(block: None = None, *, merge: Callable = keep_first) -> Callable[[ValidatorBlock], Validator]:
    ...


def parallel(block: Optional[ValidatorBlock] = None, *, merge: Callable = keep_first):
    """
    Composes the validators returned (or yielded) by `block` in parallel, see `compose_all`.
    Can be used as `@parallel` or, to set a merge function, as `@parallel(merge=...)`.
    """

    def _decorate(inner_block: ValidatorBlock) -> Validator:
        return compose_all(list(inner_block()), merge)

    if block is None:
        return _decorate
    return _decorate(block)
