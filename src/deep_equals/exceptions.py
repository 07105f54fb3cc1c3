"""
Custom exception hierarchy for deep-equals.

Assertion failures carry a structured Failure record alongside the display message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemas.failure import Failure


class DeepEqualsError(Exception):
    """Base exception for deep-equals package."""

    pass


class AssertionFailure(DeepEqualsError, AssertionError):  # noqa: N818
    """
    Expected and actual values differ.

    Subclasses AssertionError so test runners report it as a regular assertion failure.
    """

    def __init__(self, failure: Failure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def message(self) -> str:
        """The human-readable mismatch description."""
        return self.failure.message


class TypeMismatchError(AssertionFailure, TypeError):
    """Expected and actual values have different type tags."""

    pass


class ValidationError(DeepEqualsError):
    """Invalid input to a comparison."""

    pass


class UnsupportedValueError(ValidationError):
    """A value cannot be classified into any supported kind."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class UndefinedExpectedError(ValidationError):
    """The expected value is UNDEFINED, which cannot be compared against."""

    pass


class PathError(DeepEqualsError):
    """
    A failure path could not be resolved against a document.

    Carries the JSONPath expression that failed to resolve.
    """

    def __init__(self, message: str, jsonpath_expression: str | None = None):
        super().__init__(message)
        self.jsonpath_expression = jsonpath_expression
