"""
This package enables you to build validators for arbitrary data by composing small, reusable checks. Validators can
be chained sequentially (stop at the first failure) or combined in parallel (collect all failures), focused on nested
fields and their errors can be grouped e.g. by form field.
"""

from .builders import parallel, sequenced
from .errors import EmptyCompositionError, ValidationErrors, ValidationFailure
from .keypath import KeyPath
from .outcome import Failure, Outcome, Success
from .validator import Validator, compose_all, compose_sequential
from .verify import Verify
