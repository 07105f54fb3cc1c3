"""
Deep-equality comparator.

`assert_equals` classifies the expected value and runs a fixed sequence of checks: null check,
type-tag check, primitive equality, sequence comparison, then key-set and value comparison. The
first mismatch raises an AssertionFailure; nothing is aggregated within a single call.

Strictness differs between the passes. Primitives must match in kind and value. Sequences must
have the same top-level length and the same flattened content, so `[1, [2, 3]]` and
`[1, 2, [3]]` are equal. Mapping keys are checked symmetrically at the top level and one level
down, and leaf values are checked all the way down the expected side.
"""

import dataclasses
import logging
from typing import Any

from .constants import FailureKind, ValueKind
from .exceptions import AssertionFailure, TypeMismatchError, UndefinedExpectedError
from .options import DEFAULT_OPTIONS, CompareOptions
from .paths import Path, render_message_path
from .schemas.failure import ComparisonResult, Failure
from .values import (
    UNDEFINED,
    child_of,
    classify,
    flatten,
    has_key,
    keys_of,
    normalize,
    render,
    strictly_equal,
)

logger = logging.getLogger(__name__)


def _fail(
        kind: FailureKind,
        message: str,
        path: Path = (),
        expected: Any = None,  # noqa: ANN401
        actual: Any = None,  # noqa: ANN401
        error_class: type[AssertionFailure] = AssertionFailure,
    ) -> AssertionFailure:
    failure = Failure(kind=kind, message=message, path=path, expected=expected, actual=actual)
    logger.debug("Comparison failed (%s): %s", kind, message)
    return error_class(failure)


def assert_equals(
        message: str,
        expected: Any,  # noqa: ANN401
        actual: Any,  # noqa: ANN401
        options: CompareOptions | None = None,
    ) -> None:
    """
    Assert that `actual` deeply equals `expected`.

    Args:
        message: Prefix prepended to every failure message (e.g. 'Test 01: ')
        expected: The reference value
        actual: The value under test
        options: Comparison options; defaults to CompareOptions()

    Raises:
        AssertionFailure: On the first mismatch found
        TypeMismatchError: If expected and actual have different type tags
        UndefinedExpectedError: If expected is UNDEFINED
        UnsupportedValueError: If a value cannot be classified
    """
    options = options or DEFAULT_OPTIONS
    expected = normalize(expected)
    actual = normalize(actual)

    if expected is None:
        if actual is not None:
            raise _fail(
                FailureKind.NULL_TYPE_MISMATCH,
                f"{message}Expected type null but found type {classify(actual).typeof}",
                expected=expected,
                actual=actual,
            )
        return

    if expected is UNDEFINED:
        raise UndefinedExpectedError(f"{message}Expected value is undefined")

    expected_kind = classify(expected)
    actual_kind = classify(actual)
    logger.debug("Comparing %s against %s", expected_kind, actual_kind)

    if expected_kind != actual_kind:
        raise _fail(
            FailureKind.TYPE_MISMATCH,
            f"{message}Expected type {expected_kind.tag} but found {actual_kind.tag}",
            expected=expected,
            actual=actual,
            error_class=TypeMismatchError,
        )

    if expected_kind in (ValueKind.NUMBER, ValueKind.BOOLEAN):
        if not strictly_equal(expected, actual, options.nan_equals_nan):
            raise _fail(
                FailureKind.VALUE_MISMATCH,
                f"{message}Expected {render(expected)} found {render(actual)}",
                expected=expected,
                actual=actual,
            )
        return

    if expected_kind == ValueKind.STRING:
        if expected != actual:
            raise _fail(
                FailureKind.VALUE_MISMATCH,
                f'{message}Expected "{expected}" found "{actual}"',
                expected=expected,
                actual=actual,
            )
        return

    if expected_kind == ValueKind.ARRAY:
        compare_arrays(message, expected, actual, options)

    compare_object_keys(message, expected, actual)
    compare_object_values(f"{message}Expected ", expected, actual, options=options)


def compare_arrays(
        message: str,
        expected: list | tuple,
        actual: list | tuple,
        options: CompareOptions | None = None,
    ) -> None:
    """
    Check top-level length, then flattened content element by element.

    A mapping element paired with a mapping is compared in full with assert_equals; the failure
    path is then prefixed with the flattened index.
    """
    options = options or DEFAULT_OPTIONS
    if len(expected) != len(actual):
        raise _fail(
            FailureKind.ARRAY_LENGTH_MISMATCH,
            f"{message}Expected array length {len(expected)} found {len(actual)}",
            expected=len(expected),
            actual=len(actual),
        )

    flat_expected = flatten(expected)
    flat_actual = flatten(actual)
    for index, item in enumerate(flat_expected):
        other = flat_actual[index] if index < len(flat_actual) else UNDEFINED
        if classify(item) == ValueKind.OBJECT and classify(other) == ValueKind.OBJECT:
            try:
                assert_equals(message, item, other, options)
            except AssertionFailure as e:
                failure = dataclasses.replace(e.failure, path=(index, *e.failure.path))
                raise type(e)(failure) from e
            continue
        if not strictly_equal(item, other, options.nan_equals_nan):
            raise _fail(
                FailureKind.ARRAY_ELEMENT_MISMATCH,
                f'{message}Expected array element "{render(item)}" but found "{render(other)}"',
                expected=item,
                actual=other,
            )


def compare_object_keys(message: str, expected: Any, actual: Any) -> None:  # noqa: ANN401
    """Check that both sides expose the same keys, plus the expected side's nested keys."""
    for key in keys_of(expected):
        expected_child = child_of(expected, key)
        if not has_key(actual, key):
            raise _fail(
                FailureKind.MISSING_KEY,
                f"{message}Expected {key} but was not found",
                path=(key,),
                expected=expected_child,
                actual=UNDEFINED,
            )

        actual_child = child_of(actual, key)
        for nested_key in keys_of(expected_child):
            if not has_key(actual_child, nested_key):
                raise _fail(
                    FailureKind.MISSING_NESTED_KEY,
                    f"{message}Expected {key}.{nested_key} but was not found",
                    path=(key, nested_key),
                    expected=child_of(expected_child, nested_key),
                    actual=UNDEFINED,
                )

    for key in keys_of(actual):
        if not has_key(expected, key):
            raise _fail(
                FailureKind.UNEXPECTED_KEY,
                f"{message}Expected no property but found {key}",
                path=(key,),
                expected=UNDEFINED,
                actual=child_of(actual, key),
            )


def compare_object_values(
        message: str,
        expected: Any,  # noqa: ANN401
        actual: Any,  # noqa: ANN401
        path: Path = (),
        options: CompareOptions | None = None,
    ) -> None:
    """
    Recursively compare every leaf of `expected` with the same location in `actual`.

    The path is only rendered into the message when a leaf differs, so sibling keys never leak
    into each other's messages.
    """
    options = options or DEFAULT_OPTIONS
    for key in keys_of(expected):
        expected_child = child_of(expected, key)
        actual_child = child_of(actual, key)
        if classify(expected_child).is_structured:
            compare_object_values(message, expected_child, actual_child, (*path, key), options)
        elif not strictly_equal(expected_child, actual_child, options.nan_equals_nan):
            raise _fail(
                FailureKind.NESTED_VALUE_MISMATCH,
                f'{render_message_path(message, path)}{key} "{render(expected_child)}" '
                f'but found "{render(actual_child)}"',
                path=(*path, key),
                expected=expected_child,
                actual=actual_child,
            )


def compare(
        expected: Any,  # noqa: ANN401
        actual: Any,  # noqa: ANN401
        message: str = '',
        options: CompareOptions | None = None,
    ) -> ComparisonResult:
    """
    Compare two values without raising on a mismatch.

    Returns:
        ComparisonResult with passed=True, or passed=False and the first Failure

    Raises:
        ValidationError: If the inputs cannot be compared at all
    """
    try:
        assert_equals(message, expected, actual, options)
    except AssertionFailure as e:
        return ComparisonResult(passed=False, failure=e.failure)
    return ComparisonResult(passed=True)
