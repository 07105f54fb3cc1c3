"""Tests for result schemas."""

import pytest

from deep_equals import (
    AssertionCase,
    CaseResult,
    ComparisonResult,
    Failure,
    FailureKind,
    RunResult,
    RunSummary,
    Status,
)


class TestFailure:
    """Test the Failure record."""

    def test_defaults(self):
        """Test optional fields default to an empty path."""
        failure = Failure(kind=FailureKind.VALUE_MISMATCH, message="Expected 2 found 1")
        assert failure.path == ()
        assert failure.jsonpath == "$"

    def test_kind_must_be_enum(self):
        """Test a plain string kind is rejected."""
        with pytest.raises(ValueError, match="Failure.kind must be a FailureKind"):
            Failure(kind="value_mismatch", message="x")

    def test_path_must_be_tuple(self):
        """Test a list path is rejected."""
        with pytest.raises(ValueError, match="Failure.path must be a tuple"):
            Failure(kind=FailureKind.MISSING_KEY, message="x", path=["a"])

    def test_locate(self):
        """Test locating the failure inside a document."""
        failure = Failure(
            kind=FailureKind.NESTED_VALUE_MISMATCH, message="x", path=("rows", 1, "id"),
        )
        assert failure.locate({"rows": [{"id": 1}, {"id": 2}]}) == 2

    def test_kind_serializes_as_string(self):
        """Test FailureKind compares equal to its string value."""
        assert FailureKind.MISSING_KEY == "missing_key"
        assert str(FailureKind.UNEXPECTED_KEY) == "unexpected_key"


class TestComparisonResult:
    """Test ComparisonResult consistency checks."""

    def test_failure_required_when_not_passed(self):
        """Test passed=False requires a failure."""
        with pytest.raises(ValueError, match="failure is required"):
            ComparisonResult(passed=False)

    def test_failure_forbidden_when_passed(self):
        """Test passed=True forbids a failure."""
        failure = Failure(kind=FailureKind.VALUE_MISMATCH, message="x")
        with pytest.raises(ValueError, match="should only be present"):
            ComparisonResult(passed=True, failure=failure)


class TestCaseResultSchema:
    """Test CaseResult consistency checks."""

    def setup_method(self):
        """Set up test fixtures."""
        self.case = AssertionCase(message="T: ", expected=1, actual=2)
        self.failure = Failure(kind=FailureKind.VALUE_MISMATCH, message="T: Expected 1 found 2")

    def test_failed_requires_failure(self):
        """Test status 'failed' requires a failure."""
        with pytest.raises(ValueError, match="failure is required"):
            CaseResult(case=self.case, status=Status.FAILED)

    def test_passed_forbids_failure(self):
        """Test status 'passed' forbids a failure."""
        with pytest.raises(ValueError, match="should only be present"):
            CaseResult(case=self.case, status=Status.PASSED, failure=self.failure)

    def test_error_requires_message(self):
        """Test status 'error' requires an error message."""
        with pytest.raises(ValueError, match="error_message is required"):
            CaseResult(case=self.case, status=Status.ERROR)

    def test_message(self):
        """Test the message property for each status."""
        failed = CaseResult(case=self.case, status=Status.FAILED, failure=self.failure)
        errored = CaseResult(case=self.case, status=Status.ERROR, error_message="boom")
        passed = CaseResult(case=self.case, status=Status.PASSED)
        assert failed.message == "T: Expected 1 found 2"
        assert errored.message == "boom"
        assert passed.message is None

    def test_case_message_must_be_string(self):
        """Test AssertionCase rejects a non-string message."""
        with pytest.raises(ValueError, match="AssertionCase.message must be a string"):
            AssertionCase(message=None, expected=1, actual=1)


class TestRunSummary:
    """Test RunSummary and RunResult aggregation."""

    def test_counts_must_sum(self):
        """Test inconsistent counts are rejected."""
        with pytest.raises(ValueError, match="must sum to total"):
            RunSummary(total=3, passed=1, failed=1)

    def test_negative_total(self):
        """Test a negative total is rejected."""
        with pytest.raises(ValueError, match="must be non-negative"):
            RunSummary(total=-1, passed=0, failed=0)

    def test_summary_computed(self):
        """Test RunResult derives its summary from the results."""
        case = AssertionCase(message="", expected=1, actual=1)
        failure = Failure(kind=FailureKind.VALUE_MISMATCH, message="x")
        result = RunResult(results=[
            CaseResult(case=case, status=Status.PASSED),
            CaseResult(case=case, status=Status.FAILED, failure=failure),
            CaseResult(case=case, status=Status.ERROR, error_message="e"),
        ])
        assert result.summary == RunSummary(total=3, passed=1, failed=1, errors=1)
        assert not result.passed

    def test_empty_run_passes(self):
        """Test a run without cases counts as passed."""
        result = RunResult(results=[])
        assert result.summary.total == 0
        assert result.passed
