"""
Assertion runner.

Runs assert_equals inside a catching region and collects the failure messages into a
caller-owned list, so a whole batch of comparisons can be reviewed at once.
"""

import logging
from collections.abc import Iterable
from typing import Any

from .comparator import assert_equals
from .constants import Status
from .exceptions import AssertionFailure, DeepEqualsError
from .options import CompareOptions
from .schemas import AssertionCase, CaseResult, RunResult

logger = logging.getLogger(__name__)


def run_test(
        message: str,
        assertion_failures: list[str],
        expected: Any,  # noqa: ANN401
        actual: Any,  # noqa: ANN401
        options: CompareOptions | None = None,
    ) -> CaseResult:
    """
    Run one assertion and append its failure message to `assertion_failures`.

    Comparison errors (e.g. an UNDEFINED expected value) are recorded the same way as mismatches,
    with status 'error'. Exceptions outside the deep-equals hierarchy propagate.

    Args:
        message: Prefix for the failure message
        assertion_failures: List the failure message is appended to
        expected: The reference value
        actual: The value under test
        options: Comparison options

    Returns:
        CaseResult describing the outcome
    """
    case = AssertionCase(message=message, expected=expected, actual=actual)
    return _run_case(case, assertion_failures, options)


def run_all(
        cases: Iterable[AssertionCase],
        options: CompareOptions | None = None,
    ) -> RunResult:
    """
    Run assertion cases in order.

    Returns:
        RunResult with per-case results, the ordered failure messages and a summary
    """
    assertion_failures: list[str] = []
    results = [_run_case(case, assertion_failures, options) for case in cases]
    run_result = RunResult(results=results, assertion_failures=assertion_failures)
    logger.debug(
        "Ran %d cases: %d passed, %d failed, %d errors",
        run_result.summary.total,
        run_result.summary.passed,
        run_result.summary.failed,
        run_result.summary.errors,
    )
    return run_result


def _run_case(
        case: AssertionCase,
        assertion_failures: list[str],
        options: CompareOptions | None,
    ) -> CaseResult:
    try:
        assert_equals(case.message, case.expected, case.actual, options)
    except AssertionFailure as e:
        logger.info("Assertion failed: %s", e.message)
        assertion_failures.append(e.message)
        return CaseResult(case=case, status=Status.FAILED, failure=e.failure)
    except DeepEqualsError as e:
        logger.info("Assertion could not run: %s", e)
        assertion_failures.append(str(e))
        return CaseResult(case=case, status=Status.ERROR, error_message=str(e))

    logger.debug("Assertion passed: %r", case.message)
    return CaseResult(case=case, status=Status.PASSED)


def render_failures(assertion_failures: Iterable[str]) -> str:
    """Render failure messages as a bulleted list, one message per line."""
    return '\n'.join(f"- {message}" for message in assertion_failures)
