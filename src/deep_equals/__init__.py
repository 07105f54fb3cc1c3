"""
deep-equals - Python Implementation.

Deep-equality assertions that compare an expected value against an actual value of any shape
and describe the first mismatch in a human-readable message.
"""

from .comparator import (
    assert_equals,
    compare,
    compare_arrays,
    compare_object_keys,
    compare_object_values,
)
from .constants import FailureKind, Status, ValueKind
from .exceptions import (
    AssertionFailure,
    DeepEqualsError,
    PathError,
    TypeMismatchError,
    UndefinedExpectedError,
    UnsupportedValueError,
    ValidationError,
)
from .options import CompareOptions
from .runner import render_failures, run_all, run_test
from .schemas import AssertionCase, CaseResult, ComparisonResult, Failure, RunResult, RunSummary
from .values import UNDEFINED, classify

__version__ = "0.1.0"
__all__ = [
    "UNDEFINED",
    # Schema classes
    "AssertionCase",
    # Exceptions
    "AssertionFailure",
    "CaseResult",
    "CompareOptions",
    "ComparisonResult",
    "DeepEqualsError",
    "Failure",
    # Constants and enums
    "FailureKind",
    "PathError",
    "RunResult",
    "RunSummary",
    "Status",
    "TypeMismatchError",
    "UndefinedExpectedError",
    "UnsupportedValueError",
    "ValidationError",
    "ValueKind",
    # Core comparison functionality
    "assert_equals",
    "classify",
    "compare",
    "compare_arrays",
    "compare_object_keys",
    "compare_object_values",
    # Runner functions
    "render_failures",
    "run_all",
    "run_test",
]
