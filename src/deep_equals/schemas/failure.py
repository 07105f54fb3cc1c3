"""Failure and ComparisonResult schemas."""

from dataclasses import dataclass, field
from typing import Any

from ..constants import FailureKind
from ..paths import Path, resolve, to_jsonpath


@dataclass(frozen=True)
class Failure:
    """
    Structured description of the first mismatch found by a comparison.

    Required Fields:
    - kind: Which kind of mismatch was detected
    - message: Human-readable description, including the caller's message prefix

    Optional Fields:
    - path: Segments leading from the compared roots to the mismatch (empty at the root)
    - expected: Snapshot of the expected side at the mismatch
    - actual: Snapshot of the actual side at the mismatch
    """

    kind: FailureKind
    message: str
    path: Path = field(default=())
    expected: Any = None
    actual: Any = None

    def __post_init__(self):
        """Validate required fields."""
        if not isinstance(self.kind, FailureKind):
            raise ValueError("Failure.kind must be a FailureKind")
        if not isinstance(self.path, tuple):
            raise ValueError("Failure.path must be a tuple")

    @property
    def jsonpath(self) -> str:
        """The failure path as a JSONPath expression."""
        return to_jsonpath(self.path)

    def locate(self, document: Any) -> Any:  # noqa: ANN401
        """Resolve the failure path against `document` (e.g. the compared expected value)."""
        return resolve(document, self.path)


@dataclass
class ComparisonResult:
    """
    Outcome of a non-raising comparison.

    Status Logic:
    - passed is True: failure is None
    - passed is False: failure describes the first mismatch
    """

    passed: bool
    failure: Failure | None = None

    def __post_init__(self):
        """Validate that passed and failure agree."""
        if self.passed and self.failure is not None:
            raise ValueError("ComparisonResult.failure should only be present when passed is False")
        if not self.passed and self.failure is None:
            raise ValueError("ComparisonResult.failure is required when passed is False")

    def __bool__(self) -> bool:
        return self.passed

    @property
    def message(self) -> str | None:
        """Failure message, or None when the comparison passed."""
        return self.failure.message if self.failure else None
