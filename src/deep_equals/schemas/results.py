"""Assertion case and run result schemas."""

from dataclasses import dataclass, field
from typing import Any, Literal

from ..constants import Status
from .failure import Failure


@dataclass
class AssertionCase:
    """
    One expected/actual pair to run through assert_equals.

    Required Fields:
    - message: Prefix for any failure message (e.g. 'Test 01: ')
    - expected: The reference value
    - actual: The value under test

    Optional Fields:
    - metadata: Descriptive information about the case
    """

    message: str
    expected: Any
    actual: Any
    metadata: dict[str, Any] | None = None

    def __post_init__(self):
        """Validate required fields."""
        if not isinstance(self.message, str):
            raise ValueError("AssertionCase.message must be a string")


@dataclass
class CaseResult:
    """
    Outcome of running a single AssertionCase.

    Status Logic:
    - 'passed': the values are equal
    - 'failed': the comparator found a mismatch; failure holds the details
    - 'error': the values could not be compared; error_message holds the reason
    """

    case: AssertionCase
    status: Status | Literal['passed', 'failed', 'error']
    failure: Failure | None = None
    error_message: str | None = None

    def __post_init__(self):
        """Validate that status agrees with failure and error details."""
        if self.status == Status.FAILED and self.failure is None:
            raise ValueError("CaseResult.failure is required when status is 'failed'")
        if self.status != Status.FAILED and self.failure is not None:
            raise ValueError("CaseResult.failure should only be present when status is 'failed'")
        if self.status == Status.ERROR and not self.error_message:
            raise ValueError("CaseResult.error_message is required when status is 'error'")

    @property
    def message(self) -> str | None:
        """The message appended to the failure list, if any."""
        if self.failure is not None:
            return self.failure.message
        return self.error_message


@dataclass
class RunSummary:
    """Aggregate statistics for a run."""

    total: int
    passed: int
    failed: int
    errors: int = 0

    def __post_init__(self):
        """Validate summary statistics."""
        if self.total < 0:
            raise ValueError("RunSummary.total must be non-negative")
        if (self.passed + self.failed + self.errors) != self.total:
            raise ValueError("RunSummary counts must sum to total")


@dataclass
class RunResult:
    """
    Results of running a list of assertion cases in order.

    - results: one CaseResult per case, in input order
    - assertion_failures: failure messages in the order they were produced
    - summary: aggregate counts
    """

    results: list[CaseResult]
    assertion_failures: list[str] = field(default_factory=list)
    summary: RunSummary | None = None

    def __post_init__(self):
        """Compute the summary when not supplied."""
        if self.summary is None:
            self.summary = RunSummary(
                total=len(self.results),
                passed=sum(1 for r in self.results if r.status == Status.PASSED),
                failed=sum(1 for r in self.results if r.status == Status.FAILED),
                errors=sum(1 for r in self.results if r.status == Status.ERROR),
            )

    @property
    def passed(self) -> bool:
        """True when every case passed."""
        return self.summary.passed == self.summary.total
